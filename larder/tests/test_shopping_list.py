import unittest
from larder.domain.InventoryStore import InventoryStore
from larder.events.Event_Bus import EventBus
from larder.infra.Storage import MemoryStorage
from larder.logic.shopping.views import TO_BUY, CHECKED


class TestShoppingList(unittest.TestCase):

    def setUp(self):
        self.store = InventoryStore(MemoryStorage(), event_bus=EventBus())

    def _pairs(self):
        return [(i.name, i.quantity, i.is_checked) for i in self.store.shopping_items]

    def test_add_new_item(self):
        item = self.store.add_or_increment_shopping("  Apples ", 2)
        self.assertEqual(item.name, "Apples")
        self.assertEqual(self._pairs(), [("Apples", 2, False)])

    def test_add_merges_by_normalized_name(self):
        self.store.add_or_increment_shopping("Milk", 1)
        self.store.add_or_increment_shopping(" MILK ", 2)
        self.assertEqual(self._pairs(), [("Milk", 3, False)])

    def test_default_quantity_is_one(self):
        self.store.add_or_increment_shopping("Bread")
        self.assertEqual(self._pairs(), [("Bread", 1, False)])

    def test_add_ignores_blank_name_and_non_positive_quantity(self):
        self.assertIsNone(self.store.add_or_increment_shopping("   ", 2))
        self.assertIsNone(self.store.add_or_increment_shopping("Milk", 0))
        self.assertIsNone(self.store.add_or_increment_shopping("Milk", -1))
        self.assertEqual(self.store.shopping_items, [])

    def test_merge_keeps_checked_flag_and_id(self):
        first = self.store.add_or_increment_shopping("Milk", 1)
        self.store.toggle(first)
        merged = self.store.add_or_increment_shopping("milk", 1)
        self.assertEqual(merged.id, first.id)
        self.assertTrue(merged.is_checked)

    def test_toggle_by_item_and_by_id(self):
        item = self.store.add_or_increment_shopping("Eggs", 1)
        self.assertTrue(self.store.toggle(item).is_checked)
        self.assertFalse(self.store.toggle(item.id).is_checked)

    def test_toggle_unknown_is_noop(self):
        self.store.add_or_increment_shopping("Eggs", 1)
        self.assertIsNone(self.store.toggle("missing-id"))
        self.assertEqual(self._pairs(), [("Eggs", 1, False)])

    def test_delete_by_ids(self):
        a = self.store.add_or_increment_shopping("A", 1)
        b = self.store.add_or_increment_shopping("B", 1)
        self.assertEqual(self.store.delete_shopping({a.id, "nope"}), 1)
        self.assertEqual([i.id for i in self.store.shopping_items], [b.id])
        self.assertEqual(self.store.delete_shopping(b.id), 1)
        self.assertEqual(self.store.shopping_items, [])

    def test_delete_from_filtered_view_uses_identity(self):
        self.store.add_or_increment_shopping("A", 1)
        b = self.store.add_or_increment_shopping("B", 1)
        self.store.add_or_increment_shopping("C", 1)
        self.store.toggle(b)
        # To Buy view is [A, C]; position 0 must remove A, not master position 0/1
        removed = self.store.delete_shopping_at([0], TO_BUY)
        self.assertEqual(removed, 1)
        self.assertEqual([i.name for i in self.store.shopping_items], ["B", "C"])

    def test_delete_from_caller_held_view(self):
        a = self.store.add_or_increment_shopping("A", 1)
        self.store.add_or_increment_shopping("B", 1)
        self.store.toggle(a)
        checked_view = self.store.checked()
        self.store.delete_shopping_at([0, 5], checked_view)
        self.assertEqual([i.name for i in self.store.shopping_items], ["B"])

    def test_delete_from_checked_view_out_of_range(self):
        self.store.add_or_increment_shopping("A", 1)
        self.assertEqual(self.store.delete_shopping_at([0], CHECKED), 0)
        self.assertEqual(len(self.store.shopping_items), 1)

    def test_views(self):
        self.store.add_or_increment_shopping("A", 1)
        b = self.store.add_or_increment_shopping("B", 1)
        self.store.toggle(b)
        self.assertEqual([i.name for i in self.store.to_buy()], ["A"])
        self.assertEqual([i.name for i in self.store.checked()], ["B"])

    def test_complete_shopping_moves_checked_to_kitchen(self):
        milk = self.store.add_or_increment_shopping("Milk", 1)
        self.store.add_or_increment_shopping("Bread", 2)
        self.store.toggle(milk)
        moved = self.store.complete_shopping()
        self.assertEqual(moved, [("Milk", 1)])
        self.assertEqual(self._pairs(), [("Bread", 2, False)])
        self.assertEqual([(k.name, k.quantity) for k in self.store.kitchen_items], [("Milk", 1)])

    def test_complete_shopping_merges_into_existing_kitchen_item(self):
        self.store.add_to_kitchen("milk", 2)
        milk = self.store.add_or_increment_shopping("Milk", 1)
        self.store.toggle(milk)
        self.store.complete_shopping()
        self.assertEqual([(k.name, k.quantity) for k in self.store.kitchen_items], [("milk", 3)])

    def test_complete_shopping_without_checked_items(self):
        self.store.add_or_increment_shopping("Bread", 2)
        self.assertEqual(self.store.complete_shopping(), [])
        self.assertEqual(self._pairs(), [("Bread", 2, False)])
        self.assertEqual(self.store.kitchen_items, [])

    def test_accessors_return_copies(self):
        item = self.store.add_or_increment_shopping("Milk", 1)
        item.quantity = 99
        self.store.shopping_items[0].quantity = 50
        self.assertEqual(self.store.shopping_items[0].quantity, 1)

    def test_get_shopping_item(self):
        item = self.store.add_or_increment_shopping("Milk", 1)
        self.assertEqual(self.store.get_shopping_item(item.id), item)
        self.assertIsNone(self.store.get_shopping_item("missing"))
