"""Quantity merge rules.

Two rules cover every quantity change in the store:

  * ``increment_or_append`` - shopping semantics: positive amounts only, merge
    into the entry with the same normalized name or append a new one.
  * ``apply_delta`` - kitchen semantics: signed amounts, floor at zero, an
    entry reaching zero is removed from the list in the same step.

Both mutate the given list in place and leave display names untouched on merge.
"""
from typing import Callable, List, Optional, Tuple

from larder.logic.naming import normalize


def find_by_name(items: List, name: str):
    """Return the first entry whose name normalizes like ``name`` (or None)."""
    key = normalize(name)
    if not key:
        return None
    for item in items:
        if normalize(item.name) == key:
            return item
    return None


def increment_or_append(items: List, name: str, quantity: int,
                        factory: Callable[[str, int], object]):
    """Add ``quantity`` of ``name``; returns the touched entry or None for a no-op."""
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed or quantity <= 0:
        return None
    existing = find_by_name(items, trimmed)
    if existing is not None:
        existing.quantity += quantity
        return existing
    item = factory(trimmed, quantity)
    items.append(item)
    return item


def apply_delta(items: List, name: str, delta: int,
                factory: Callable[[str, int], object]) -> Optional[Tuple[object, int, int]]:
    """Apply a signed change to the entry named ``name``.

    Returns ``(item, before, after)`` or None when nothing changed. ``after == 0``
    means the entry has been removed from ``items``. A negative delta with no
    matching entry is a no-op.
    """
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed or delta == 0:
        return None
    existing = find_by_name(items, trimmed)
    if existing is None:
        if delta < 0:
            return None
        item = factory(trimmed, delta)
        items.append(item)
        return item, 0, delta
    before = existing.quantity
    after = max(0, before + delta)
    if after == 0:
        items.remove(existing)
    existing.quantity = after
    return existing, before, after


__all__ = ["find_by_name", "increment_or_append", "apply_delta"]
