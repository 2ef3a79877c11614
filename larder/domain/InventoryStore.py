"""InventoryStore aggregate: shopping list, kitchen inventory and recipes.

The store owns the three collections and is the only way to change them.
Every mutating operation updates memory first, then saves each touched
collection through the key-value storage collaborator. Saving is best-effort:
a failure is logged and published as ``store.save_failed`` but never undoes
the in-memory change or reaches the caller.

Input that cannot apply (blank names, non-positive quantities, unknown ids)
is ignored without raising. Read accessors hand out copies, so callers cannot
bypass the mutators.

Each public operation holds a re-entrant lock for its whole
read-modify-write, including the save.
"""
import copy
import logging
import threading
from typing import Iterable, List, Optional, Tuple

from larder.domain.KitchenItem import KitchenItem
from larder.domain.Recipe import Recipe, RecipeIngredient
from larder.domain.ShoppingItem import ShoppingItem
from larder.events.Event_Bus import GLOBAL_EVENT_BUS
from larder.events.event_helpers import (
    publish_depleted, publish_low_stock, publish_save_failed, publish_shopping_completed
)
from larder.infra.Collection_Repository import read_collection, write_collection
from larder.infra.Storage import MemoryStorage
from larder.logic.kitchen.analysis import compute_cookable, compute_low_stock, times_cookable
from larder.logic.naming import normalize
from larder.logic.quantities import apply_delta, increment_or_append
from larder.logic.shopping.missing import plan_missing_ingredients
from larder.logic.shopping.views import ids_at, project, to_buy, checked
from larder.utilities.config import LOW_STOCK_THRESHOLD
from larder.utilities.constants import SHOPPING_KEY, KITCHEN_KEY, RECIPES_KEY

logger = logging.getLogger(__name__)


def _id_set(ids) -> set:
    if isinstance(ids, str):
        return {ids}
    return set(ids or ())


def _merge_loaded(items: List, minimum: int) -> List:
    """Drop entries below ``minimum`` and fold same-name duplicates into the first one."""
    merged: List = []
    index = {}
    for item in items:
        key = normalize(item.name)
        if not key or item.quantity < minimum:
            continue
        if key in index:
            index[key].quantity += item.quantity
            continue
        index[key] = item
        merged.append(item)
    return merged


class InventoryStore:
    def __init__(self, storage=None, event_bus=None, low_stock_threshold: int = LOW_STOCK_THRESHOLD):
        self._storage = storage if storage is not None else MemoryStorage()
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self.low_stock_threshold = low_stock_threshold
        self._lock = threading.RLock()
        self._shopping: List[ShoppingItem] = []
        self._kitchen: List[KitchenItem] = []
        self._recipes: List[Recipe] = []

    # --- Wiring -----------------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    @property
    def event_bus(self):
        return self._event_bus

    def _collection(self, key: str) -> List:
        return {SHOPPING_KEY: self._shopping, KITCHEN_KEY: self._kitchen, RECIPES_KEY: self._recipes}[key]

    def load(self):
        '''
        Loads the three collections from storage, one key each.
        Missing keys leave the collection empty. Stored data breaking the
        merge invariants (duplicate names, non-positive quantities) is repaired.
        '''
        with self._lock:
            shopping = read_collection(self._storage, SHOPPING_KEY, ShoppingItem.from_dict)
            kitchen = read_collection(self._storage, KITCHEN_KEY, KitchenItem.from_dict)
            self._recipes = read_collection(self._storage, RECIPES_KEY, Recipe.from_dict)
            self._shopping = _merge_loaded(shopping, minimum=1)
            self._kitchen = _merge_loaded(kitchen, minimum=1)
            if len(self._shopping) != len(shopping) or len(self._kitchen) != len(kitchen):
                logger.warning("Repaired stored collections: shopping %d -> %d, kitchen %d -> %d",
                               len(shopping), len(self._shopping), len(kitchen), len(self._kitchen))
            logger.info("Loaded %d shopping, %d kitchen, %d recipes",
                        len(self._shopping), len(self._kitchen), len(self._recipes))
        return self

    def _persist(self, *keys: str):
        for key in keys:
            try:
                write_collection(self._storage, key, self._collection(key))
            except Exception as e:
                logger.error("Failed to save %s: %s", key, e)
                publish_save_failed(self._event_bus, key, e)

    # --- Read accessors ---------------------------------------------------
    @property
    def shopping_items(self) -> List[ShoppingItem]:
        with self._lock:
            return copy.deepcopy(self._shopping)

    @property
    def kitchen_items(self) -> List[KitchenItem]:
        with self._lock:
            return copy.deepcopy(self._kitchen)

    @property
    def recipes(self) -> List[Recipe]:
        with self._lock:
            return copy.deepcopy(self._recipes)

    def to_buy(self) -> List[ShoppingItem]:
        with self._lock:
            return copy.deepcopy(to_buy(self._shopping))

    def checked(self) -> List[ShoppingItem]:
        with self._lock:
            return copy.deepcopy(checked(self._shopping))

    def _find(self, items: Iterable, item_id):
        for item in items:
            if item.id == item_id:
                return item
        return None

    def get_shopping_item(self, item_id: str) -> Optional[ShoppingItem]:
        with self._lock:
            return copy.deepcopy(self._find(self._shopping, item_id))

    def get_kitchen_item(self, item_id: str) -> Optional[KitchenItem]:
        with self._lock:
            return copy.deepcopy(self._find(self._kitchen, item_id))

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            return copy.deepcopy(self._find(self._recipes, recipe_id))

    # --- Shopping list ----------------------------------------------------
    def _add_or_increment_shopping(self, name: str, quantity: int):
        return increment_or_append(self._shopping, name, quantity,
                                   lambda n, q: ShoppingItem(name=n, quantity=q))

    def add_or_increment_shopping(self, name: str, quantity: int = 1) -> Optional[ShoppingItem]:
        '''
        Adds ``quantity`` of ``name`` to the shopping list, merging into an
        entry with the same normalized name. Returns the resulting entry.
        '''
        with self._lock:
            item = self._add_or_increment_shopping(name, quantity)
            if item is None:
                return None
            self._persist(SHOPPING_KEY)
            return copy.deepcopy(item)

    def toggle(self, item) -> Optional[ShoppingItem]:
        '''Flips the checked flag of the entry with the id of ``item`` (an item or an id).'''
        item_id = item if isinstance(item, str) else getattr(item, 'id', None)
        with self._lock:
            target = self._find(self._shopping, item_id)
            if target is None:
                return None
            target.is_checked = not target.is_checked
            self._persist(SHOPPING_KEY)
            return copy.deepcopy(target)

    def delete_shopping(self, ids) -> int:
        wanted = _id_set(ids)
        with self._lock:
            kept = [i for i in self._shopping if i.id not in wanted]
            removed = len(self._shopping) - len(kept)
            if removed:
                self._shopping[:] = kept
                self._persist(SHOPPING_KEY)
            return removed

    def delete_shopping_at(self, offsets: Iterable[int], view) -> int:
        '''
        Deletes entries by position inside a filtered view.
        ``view`` is a view name ('to_buy' / 'checked'), projected now, or a
        sequence of items the caller is displaying. Positions resolve to ids
        before anything is removed.
        '''
        with self._lock:
            view_items = project(self._shopping, view) if isinstance(view, str) else list(view)
            return self.delete_shopping(ids_at(view_items, offsets))

    def complete_shopping(self) -> List[Tuple[str, int]]:
        '''
        Moves every checked entry into the kitchen, then clears the checked
        entries. Returns the (name, quantity) pairs moved.
        '''
        with self._lock:
            moved = [(i.name, i.quantity) for i in self._shopping if i.is_checked]
            if not moved:
                return []
            for name, quantity in moved:
                self._add_to_kitchen(name, quantity)
            self._shopping[:] = [i for i in self._shopping if not i.is_checked]
            self._persist(KITCHEN_KEY, SHOPPING_KEY)
            logger.info("Completed shopping: moved %d item(s) to the kitchen", len(moved))
            publish_shopping_completed(self._event_bus, moved)
            return moved

    # --- Kitchen ----------------------------------------------------------
    def _add_to_kitchen(self, name: str, delta: int) -> bool:
        change = apply_delta(self._kitchen, name, delta, lambda n, q: KitchenItem(name=n, quantity=q))
        if change is None:
            return False
        item, before, after = change
        if after == 0:
            publish_depleted(self._event_bus, item.name)
        elif after < before and 0 < self.low_stock_threshold and after <= self.low_stock_threshold:
            publish_low_stock(self._event_bus, copy.deepcopy(item), after, self.low_stock_threshold)
        return True

    def add_to_kitchen(self, name: str, delta: int) -> bool:
        '''
        Applies a signed change to the kitchen entry named ``name``.
        The quantity floors at zero and an entry reaching zero is removed.
        Returns True when anything changed.
        '''
        with self._lock:
            changed = self._add_to_kitchen(name, delta)
            if changed:
                self._persist(KITCHEN_KEY)
            return changed

    def set_kitchen_quantity(self, item_id: str, quantity: int) -> bool:
        '''Sets an entry to ``quantity`` by feeding the difference through add_to_kitchen.'''
        with self._lock:
            item = self._find(self._kitchen, item_id)
            if item is None:
                return False
            return self.add_to_kitchen(item.name, quantity - item.quantity)

    def delete_kitchen(self, ids) -> int:
        wanted = _id_set(ids)
        with self._lock:
            kept = [i for i in self._kitchen if i.id not in wanted]
            removed = len(self._kitchen) - len(kept)
            if removed:
                self._kitchen[:] = kept
                self._persist(KITCHEN_KEY)
            return removed

    def low_stock(self):
        with self._lock:
            return compute_low_stock(self._kitchen, self.low_stock_threshold)

    # --- Recipes ----------------------------------------------------------
    def add_recipe(self, name: str) -> Optional[Recipe]:
        '''
        Creates a recipe with no ingredients. A blank name creates nothing
        and returns None.
        '''
        trimmed = name.strip() if isinstance(name, str) else ""
        if not trimmed:
            return None
        with self._lock:
            recipe = Recipe(name=trimmed)
            self._recipes.append(recipe)
            self._persist(RECIPES_KEY)
            return copy.deepcopy(recipe)

    def add_ingredient(self, name: str, quantity: int, recipe_id: str) -> Optional[RecipeIngredient]:
        trimmed = name.strip() if isinstance(name, str) else ""
        if not trimmed or quantity <= 0:
            return None
        with self._lock:
            recipe = self._find(self._recipes, recipe_id)
            if recipe is None:
                return None
            ingredient = RecipeIngredient(name=trimmed, quantity=quantity)
            recipe.ingredients.append(ingredient)
            self._persist(RECIPES_KEY)
            return copy.deepcopy(ingredient)

    def delete_ingredient(self, ids, recipe_id: str) -> int:
        wanted = _id_set(ids)
        with self._lock:
            recipe = self._find(self._recipes, recipe_id)
            if recipe is None:
                return 0
            kept = [i for i in recipe.ingredients if i.id not in wanted]
            removed = len(recipe.ingredients) - len(kept)
            if removed:
                recipe.ingredients[:] = kept
                self._persist(RECIPES_KEY)
            return removed

    def delete_recipe(self, ids) -> int:
        '''Removes recipes by id; their ingredient lines go with them.'''
        wanted = _id_set(ids)
        with self._lock:
            kept = [r for r in self._recipes if r.id not in wanted]
            removed = len(self._recipes) - len(kept)
            if removed:
                self._recipes[:] = kept
                self._persist(RECIPES_KEY)
            return removed

    # --- Reconciliation ---------------------------------------------------
    def add_missing_ingredients_to_shopping(self, recipe_id: str) -> List[Tuple[str, int]]:
        '''
        Queues whatever the recipe needs beyond kitchen stock and what is
        already on the shopping list.

        Returns one (display_name, quantity) pair per normalized ingredient
        name that was added, in recipe order. Calling again with nothing
        changed in between returns [].
        '''
        with self._lock:
            recipe = self._find(self._recipes, recipe_id)
            if recipe is None:
                return []
            additions, summary = plan_missing_ingredients(recipe.ingredients, self._kitchen, self._shopping)
            for name, needed in additions:
                self._add_or_increment_shopping(name, needed)
            if additions:
                self._persist(SHOPPING_KEY)
                logger.info("Recipe %r: queued %d missing ingredient(s)", recipe.name, len(summary))
            return summary

    def can_cook(self, recipe_id: str) -> bool:
        with self._lock:
            recipe = self._find(self._recipes, recipe_id)
            return recipe is not None and times_cookable(recipe.ingredients, self._kitchen) > 0

    def cook_recipe(self, recipe_id: str) -> bool:
        '''
        Consumes one batch of the recipe from the kitchen when every
        ingredient is covered; otherwise changes nothing and returns False.
        '''
        with self._lock:
            recipe = self._find(self._recipes, recipe_id)
            if recipe is None or times_cookable(recipe.ingredients, self._kitchen) < 1:
                return False
            for ing in recipe.ingredients:
                if ing.quantity > 0:
                    self._add_to_kitchen(ing.name, -ing.quantity)
            self._persist(KITCHEN_KEY)
            logger.info("Cooked %r", recipe.name)
            return True

    def cookable_recipes(self):
        with self._lock:
            return compute_cookable(self._recipes, self._kitchen)

    def __str__(self) -> str:
        return (f"InventoryStore(shopping={len(self._shopping)}, kitchen={len(self._kitchen)}, "
                f"recipes={len(self._recipes)})")

    __repr__ = __str__
