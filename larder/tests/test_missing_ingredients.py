import unittest
from larder.domain.InventoryStore import InventoryStore
from larder.domain.Recipe import RecipeIngredient
from larder.domain.KitchenItem import KitchenItem
from larder.events.Event_Bus import EventBus
from larder.infra.Storage import MemoryStorage
from larder.logic.shopping.missing import plan_missing_ingredients


class TestAddMissingIngredients(unittest.TestCase):

    def setUp(self):
        self.store = InventoryStore(MemoryStorage(), event_bus=EventBus())

    def _recipe(self, *lines):
        recipe = self.store.add_recipe("Test recipe")
        for name, qty in lines:
            self.store.add_ingredient(name, qty, recipe.id)
        return recipe

    def _shopping(self):
        return [(i.name, i.quantity) for i in self.store.shopping_items]

    def test_nets_kitchen_and_is_idempotent(self):
        self.store.add_to_kitchen("Flour", 1)
        recipe = self._recipe(("Flour", 3), ("Sugar", 1))
        self.assertEqual(self.store.add_missing_ingredients_to_shopping(recipe.id),
                         [("Flour", 2), ("Sugar", 1)])
        self.assertEqual(self._shopping(), [("Flour", 2), ("Sugar", 1)])
        self.assertEqual(self.store.add_missing_ingredients_to_shopping(recipe.id), [])
        self.assertEqual(self._shopping(), [("Flour", 2), ("Sugar", 1)])

    def test_repeated_lines_accumulate(self):
        recipe = self._recipe(("Egg", 2), ("egg", 1))
        self.assertEqual(self.store.add_missing_ingredients_to_shopping(recipe.id), [("Egg", 3)])
        self.assertEqual(self._shopping(), [("Egg", 3)])

    def test_repeated_lines_net_jointly_against_stock(self):
        self.store.add_to_kitchen("eggs", 2)
        recipe = self._recipe(("Eggs", 2), ("EGGS", 1))
        self.assertEqual(self.store.add_missing_ingredients_to_shopping(recipe.id), [("Eggs", 1)])

    def test_already_queued_counts_checked_items(self):
        milk = self.store.add_or_increment_shopping("milk", 1)
        self.store.toggle(milk)
        recipe = self._recipe(("Milk", 3))
        self.assertEqual(self.store.add_missing_ingredients_to_shopping(recipe.id), [("Milk", 2)])
        self.assertEqual(self._shopping(), [("milk", 3)])

    def test_nothing_missing(self):
        self.store.add_to_kitchen("Pasta", 5)
        recipe = self._recipe(("pasta", 1))
        self.assertEqual(self.store.add_missing_ingredients_to_shopping(recipe.id), [])
        self.assertEqual(self.store.shopping_items, [])

    def test_unknown_recipe(self):
        self.assertEqual(self.store.add_missing_ingredients_to_shopping("missing"), [])

    def test_planner_tolerates_duplicate_kitchen_entries(self):
        lines = [RecipeIngredient("Flour", 5)]
        kitchen = [KitchenItem("Flour", 1), KitchenItem("flour", 2)]
        additions, summary = plan_missing_ingredients(lines, kitchen, [])
        self.assertEqual(additions, [("Flour", 2)])
        self.assertEqual(summary, [("Flour", 2)])

    def test_planner_summary_uses_first_line_name(self):
        lines = [RecipeIngredient("Tomato", 1), RecipeIngredient("Basil", 1), RecipeIngredient("tomato", 2)]
        kitchen = [KitchenItem("Tomato", 1)]
        additions, summary = plan_missing_ingredients(lines, kitchen, [])
        self.assertEqual(additions, [("Basil", 1), ("tomato", 2)])
        self.assertEqual(summary, [("Tomato", 2), ("Basil", 1)])
