"""Event helper utilities.

Publishing helpers used by the InventoryStore. Each takes the bus explicitly
so a store wired to a private bus (tests, embedded use) never leaks events to
the global one.

Quick import:
    from larder.events.event_helpers import (
        publish_low_stock, publish_depleted, publish_shopping_completed, publish_save_failed
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Tuple
from .Event_Bus import (
    EventBus, KITCHEN_LOW_STOCK, KITCHEN_DEPLETED, SHOPPING_COMPLETED, STORE_SAVE_FAILED
)

__all__ = [
    'publish_low_stock', 'publish_depleted', 'publish_shopping_completed', 'publish_save_failed'
]


def publish_low_stock(bus: EventBus, item: Any, remaining: int, threshold: int):
    """Publish a kitchen.low_stock event."""
    bus.publish(KITCHEN_LOW_STOCK, {
        'item': item,
        'remaining': remaining,
        'threshold': threshold
    })


def publish_depleted(bus: EventBus, name: str):
    bus.publish(KITCHEN_DEPLETED, {'name': name})


def publish_shopping_completed(bus: EventBus, moved: Iterable[Tuple[str, int]]):
    """Publish the (name, quantity) pairs moved from the shopping list to the kitchen."""
    moved_list = list(moved)
    bus.publish(SHOPPING_COMPLETED, {
        'count': len(moved_list),
        'moved': moved_list
    })


def publish_save_failed(bus: EventBus, key: str, error: Exception):
    bus.publish(STORE_SAVE_FAILED, {'key': key, 'error': str(error)})
