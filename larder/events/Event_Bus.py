"""Simple Event Bus / Observer implementation for store notifications.

Event names:
  kitchen.low_stock    -> payload {"item": KitchenItem, "remaining": int, "threshold": int}
  kitchen.depleted     -> payload {"name": str}
  shopping.completed   -> payload {"moved": [(name, quantity), ...]}
  store.save_failed    -> payload {"key": str, "error": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

KITCHEN_LOW_STOCK = "kitchen.low_stock"
KITCHEN_DEPLETED = "kitchen.depleted"
SHOPPING_COMPLETED = "shopping.completed"
STORE_SAVE_FAILED = "store.save_failed"

ALL_EVENTS = (KITCHEN_LOW_STOCK, KITCHEN_DEPLETED, SHOPPING_COMPLETED, STORE_SAVE_FAILED)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not break the store operation that published
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:
				logger.error("Error delivering %s to %r: %s", event_name, cb, e)


GLOBAL_EVENT_BUS = EventBus()

__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS',
	'KITCHEN_LOW_STOCK', 'KITCHEN_DEPLETED', 'SHOPPING_COMPLETED', 'STORE_SAVE_FAILED'
]
