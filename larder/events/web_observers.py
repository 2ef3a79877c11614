"""Web-facing observers for store events.

Subscribes to every store event on an EventBus and keeps a bounded in-memory
ring buffer the API serves from ``GET /api/events``.

  * Each event gets an auto-increment integer id (cursor) so clients can ask
    only for newer ones (since=<last_id_seen>).
  * A Lock guards the buffer; sync FastAPI endpoints run in a thread pool.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone
import logging

from larder.utilities.config import MAX_EVENTS
from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS, EventBus

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started_on: Optional[EventBus] = None


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            item = payload.get('item')
            if item is not None and hasattr(item, 'name'):
                evt['name'] = item.name
                evt['quantity'] = getattr(item, 'quantity', '')
            for k in ('name', 'remaining', 'threshold', 'count', 'key', 'error'):
                if k in payload and k not in evt:
                    evt[k] = payload[k]
            if 'moved' in payload:
                evt['moved'] = [{'name': n, 'quantity': q} for n, q in payload['moved']]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: EventBus = GLOBAL_EVENT_BUS):
    """Idempotent start: subscribe the recorder once per bus."""
    global _started_on
    if _started_on is bus:
        return
    for name in ALL_EVENTS:
        bus.subscribe(name, _record)
    _started_on = bus
    logger.debug("web observers subscribed to %d events", len(ALL_EVENTS))


def get_events(since: Optional[int] = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns every buffered event. ``next_cursor`` is the
    largest id seen so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def clear():
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


__all__ = ['start', 'get_events', 'clear']
