"""Name normalization shared by every "is this the same item" decision."""
from collections import defaultdict
from typing import Dict, Iterable


def normalize(name) -> str:
    """Trim and case-fold a name; non-string input normalizes to ''."""
    if not isinstance(name, str):
        return ""
    return name.strip().lower()


def quantity_totals(items: Iterable) -> Dict[str, int]:
    """Sum quantities by normalized name.

    Works for any objects exposing ``name`` and ``quantity``. More than one
    entry per key is tolerated and summed.
    """
    totals: Dict[str, int] = defaultdict(int)
    for item in items:
        key = normalize(item.name)
        if not key:
            continue
        totals[key] += int(item.quantity)
    return totals


__all__ = ["normalize", "quantity_totals"]
