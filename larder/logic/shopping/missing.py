"""Missing-ingredient planner.

Given a recipe's ingredient lines plus the current kitchen and shopping
collections, work out what has to be queued for purchase.
Provides plan_missing_ingredients(ingredients, kitchen_items, shopping_items).
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from larder.logic.naming import normalize, quantity_totals


def plan_missing_ingredients(ingredients: Iterable, kitchen_items: Iterable,
                             shopping_items: Iterable):
    """Compute shopping additions for a list of recipe ingredient lines.

    Args:
        ingredients: ordered recipe lines (objects with ``name`` and ``quantity``).
        kitchen_items: current kitchen stock.
        shopping_items: current shopping list, checked entries included.

    Returns:
        (additions, summary):
          additions - ``(line_name, needed)`` per ingredient line that needs buying,
                      in recipe order; apply each through the shopping merge.
          summary   - one ``(display_name, total)`` per normalized key, display
                      name from the key's first line, total accumulated over
                      every line sharing the key.

    Stock on hand plus already-queued amounts are read once up front and then
    consumed line by line, so repeated lines for one key net jointly.
    """
    lines = list(ingredients)
    have = quantity_totals(kitchen_items)
    queued = quantity_totals(shopping_items)

    cover: Dict[str, int] = {}
    accumulated: Dict[str, int] = defaultdict(int)
    additions: List[Tuple[str, int]] = []
    for line in lines:
        key = normalize(line.name)
        if not key or line.quantity <= 0:
            continue
        if key not in cover:
            cover[key] = have.get(key, 0) + queued.get(key, 0)
        needed = max(line.quantity - cover[key], 0)
        cover[key] = max(cover[key] - line.quantity, 0)
        if needed > 0:
            additions.append((line.name, needed))
            accumulated[key] += needed

    summary: List[Tuple[str, int]] = []
    emitted = set()
    for line in lines:
        key = normalize(line.name)
        if key in emitted:
            continue
        emitted.add(key)
        if accumulated.get(key, 0) > 0:
            summary.append((line.name.strip(), accumulated[key]))
    return additions, summary


__all__ = ["plan_missing_ingredients"]
