"""Filtered projections over the master shopping list.

Views are recomputed on every read and never stored. Positions inside a view
do not line up with master-list positions, so anything acting on a view
position goes through ``ids_at`` first.
"""
from typing import Iterable, List, Sequence, Set

TO_BUY = "to_buy"
CHECKED = "checked"


def to_buy(items: Iterable) -> List:
    return [i for i in items if not i.is_checked]


def checked(items: Iterable) -> List:
    return [i for i in items if i.is_checked]


def project(items: Iterable, view: str) -> List:
    if view == TO_BUY:
        return to_buy(items)
    if view == CHECKED:
        return checked(items)
    raise ValueError(f"Unknown shopping view: {view}")


def ids_at(view_items: Sequence, offsets: Iterable[int]) -> Set[str]:
    """Translate positions in a filtered view to stable item ids (out-of-range ignored)."""
    ids = set()
    for offset in offsets:
        if 0 <= offset < len(view_items):
            ids.add(view_items[offset].id)
    return ids


__all__ = ["TO_BUY", "CHECKED", "to_buy", "checked", "project", "ids_at"]
