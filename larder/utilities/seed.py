"""Demo data for a fresh store (same fixture the app previews with)."""
import logging

logger = logging.getLogger(__name__)

DEMO_SHOPPING = [("Apples", 2, False), ("Milk", 1, True), ("Pasta", 3, False)]
DEMO_KITCHEN = [("Eggs", 6), ("Flour", 1)]
DEMO_RECIPES = {
    "Spaghetti": [("Pasta", 1), ("Tomato Sauce", 2)],
    "Omelette": [("Eggs", 3), ("Milk", 1)],
}


def seed_demo(store) -> bool:
    """Fill an empty store with demo data through the public operations.

    Returns False (and touches nothing) when any collection already has content.
    """
    if store.shopping_items or store.kitchen_items or store.recipes:
        logger.info("Store not empty, skipping demo seed")
        return False
    for name, qty, is_checked in DEMO_SHOPPING:
        item = store.add_or_increment_shopping(name, qty)
        if is_checked and item is not None:
            store.toggle(item.id)
    for name, qty in DEMO_KITCHEN:
        store.add_to_kitchen(name, qty)
    for recipe_name, lines in DEMO_RECIPES.items():
        recipe = store.add_recipe(recipe_name)
        for name, qty in lines:
            store.add_ingredient(name, qty, recipe.id)
    logger.info("Seeded demo data")
    return True
