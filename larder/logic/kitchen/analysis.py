"""Kitchen stock analysis helpers."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from larder.logic.naming import normalize, quantity_totals

__all__ = ["requirements", "times_cookable", "compute_low_stock", "compute_cookable"]


def requirements(ingredients: Iterable) -> Dict[str, int]:
    """Total required quantity per normalized name (repeated lines summed)."""
    return dict(quantity_totals(i for i in ingredients if i.quantity > 0))


def times_cookable(ingredients: Iterable, kitchen_items: Iterable) -> int:
    """How many full batches the kitchen covers; 0 when anything is short.

    A recipe without ingredients is never reported as cookable.
    """
    needed = requirements(ingredients)
    if not needed:
        return 0
    stock = quantity_totals(kitchen_items)
    return min(stock.get(key, 0) // qty for key, qty in needed.items())


def compute_low_stock(kitchen_items: Iterable, threshold: int) -> List[Dict[str, Any]]:
    """Return kitchen entries at or below ``threshold`` (threshold <= 0 disables)."""
    if threshold <= 0:
        return []
    low = [
        {'id': item.id, 'name': item.name, 'quantity': item.quantity, 'threshold': threshold}
        for item in kitchen_items if item.quantity <= threshold
    ]
    low.sort(key=lambda x: (x['quantity'], normalize(x['name'])))
    return low


def compute_cookable(recipes: Iterable, kitchen_items: Iterable) -> List[Dict[str, Any]]:
    """Recipes the kitchen fully covers, with how many times each could be made."""
    kitchen = list(kitchen_items)
    result: List[Dict[str, Any]] = []
    for recipe in recipes:
        times = times_cookable(recipe.ingredients, kitchen)
        if times > 0:
            result.append({'id': recipe.id, 'name': recipe.name, 'times_possible': times})
    result.sort(key=lambda x: normalize(x['name']))
    return result
