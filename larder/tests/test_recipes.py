import unittest
from larder.domain.InventoryStore import InventoryStore
from larder.events.Event_Bus import EventBus
from larder.infra.Storage import MemoryStorage


class TestRecipes(unittest.TestCase):

    def setUp(self):
        self.store = InventoryStore(MemoryStorage(), event_bus=EventBus())
        self.pancakes = self.store.add_recipe("Pancakes")
        self.store.add_ingredient("Flour", 2, self.pancakes.id)
        self.store.add_ingredient("Milk", 1, self.pancakes.id)
        self.store.add_ingredient("Eggs", 2, self.pancakes.id)

    def test_add_recipe(self):
        recipe = self.store.add_recipe("  Omelette ")
        self.assertEqual(recipe.name, "Omelette")
        self.assertEqual(recipe.ingredients, [])
        self.assertEqual([r.name for r in self.store.recipes], ["Pancakes", "Omelette"])

    def test_add_recipe_blank_name_creates_nothing(self):
        self.assertIsNone(self.store.add_recipe("   "))
        self.assertEqual(len(self.store.recipes), 1)

    def test_add_ingredient_keeps_duplicates_in_order(self):
        self.store.add_ingredient("eggs", 1, self.pancakes.id)
        names = [i.name for i in self.store.get_recipe(self.pancakes.id).ingredients]
        self.assertEqual(names, ["Flour", "Milk", "Eggs", "eggs"])

    def test_add_ingredient_noops(self):
        self.assertIsNone(self.store.add_ingredient(" ", 1, self.pancakes.id))
        self.assertIsNone(self.store.add_ingredient("Salt", 0, self.pancakes.id))
        self.assertIsNone(self.store.add_ingredient("Salt", 1, "missing"))
        self.assertEqual(len(self.store.get_recipe(self.pancakes.id).ingredients), 3)

    def test_delete_ingredient(self):
        milk = self.store.get_recipe(self.pancakes.id).ingredients[1]
        self.assertEqual(self.store.delete_ingredient({milk.id}, self.pancakes.id), 1)
        names = [i.name for i in self.store.get_recipe(self.pancakes.id).ingredients]
        self.assertEqual(names, ["Flour", "Eggs"])
        self.assertEqual(self.store.delete_ingredient({milk.id}, "missing"), 0)

    def test_delete_recipe_cascades(self):
        self.assertEqual(self.store.delete_recipe([self.pancakes.id]), 1)
        self.assertEqual(self.store.recipes, [])
        self.assertIsNone(self.store.get_recipe(self.pancakes.id))

    def test_cook_consumes_kitchen_stock(self):
        self.store.add_to_kitchen("Flour", 2)
        self.store.add_to_kitchen("Milk", 3)
        self.store.add_to_kitchen("Eggs", 2)
        self.assertTrue(self.store.can_cook(self.pancakes.id))
        self.assertTrue(self.store.cook_recipe(self.pancakes.id))
        self.assertEqual([(k.name, k.quantity) for k in self.store.kitchen_items], [("Milk", 2)])

    def test_cook_short_changes_nothing(self):
        self.store.add_to_kitchen("Flour", 2)
        self.store.add_to_kitchen("Milk", 1)
        self.store.add_to_kitchen("Eggs", 1)
        self.assertFalse(self.store.can_cook(self.pancakes.id))
        self.assertFalse(self.store.cook_recipe(self.pancakes.id))
        self.assertEqual(len(self.store.kitchen_items), 3)

    def test_cook_counts_repeated_lines_together(self):
        omelette = self.store.add_recipe("Omelette")
        self.store.add_ingredient("Egg", 2, omelette.id)
        self.store.add_ingredient("egg", 1, omelette.id)
        self.store.add_to_kitchen("EGG", 2)
        self.assertFalse(self.store.cook_recipe(omelette.id))
        self.store.add_to_kitchen("egg", 1)
        self.assertTrue(self.store.cook_recipe(omelette.id))
        self.assertEqual(self.store.kitchen_items, [])

    def test_cookable_recipes(self):
        self.store.add_to_kitchen("Flour", 4)
        self.store.add_to_kitchen("Milk", 5)
        self.store.add_to_kitchen("Eggs", 4)
        self.store.add_recipe("Empty")
        available = self.store.cookable_recipes()
        self.assertEqual([(r['name'], r['times_possible']) for r in available], [("Pancakes", 2)])
