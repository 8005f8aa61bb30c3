# tests/test_item_factory.py
from tests.fixtures import SortTestBase
from chestsort.config import DEMO_CHEST_TEMPLATES
from chestsort.items.inventory import Inventory, InventorySlot
from chestsort.items.item_factory import ItemFactory
from chestsort.items.item_stack import Enchantment, ItemMetadata, ItemStack, PotionEffect

class TestItemFactory(SortTestBase):

    def test_type_ids_are_namespaced(self):
        self.assertEqual(ItemFactory.normalize_type_id("Stone"), "minecraft:stone")
        self.assertEqual(ItemFactory.normalize_type_id("mymod:gear"), "mymod:gear")

    def test_max_stack_sizes(self):
        self.assertEqual(ItemFactory.get_max_stack_size("cobblestone"), 64)
        self.assertEqual(ItemFactory.get_max_stack_size("minecraft:ender_pearl"), 16)
        self.assertEqual(ItemFactory.get_max_stack_size("potion"), 1)
        self.assertEqual(ItemFactory.get_max_stack_size("netherite_pickaxe"), 1)
        self.assertEqual(ItemFactory.get_max_stack_size("blue_shulker_box"), 1)
        self.assertEqual(ItemFactory.get_max_stack_size("othermod:potion"), 64)

    def test_create_stack_with_metadata(self):
        stack = ItemFactory.create_stack("enchanted_book", enchantments=[{"id": "mending"}], custom_name="Fix")
        self.assertEqual(stack.type_id, "minecraft:enchanted_book")
        self.assertEqual(stack.max_amount, 1)
        self.assertEqual(stack.metadata.enchantments, [Enchantment("mending", 1)])
        self.assertEqual(stack.display_name, "Fix")

    def test_from_dict(self):
        stack = ItemFactory.from_dict({"id": "wool", "data": "14", "amount": 7, "lore": "soft"})
        self.assertEqual((stack.type_id, stack.data, stack.amount), ("minecraft:wool", 14, 7))
        self.assertEqual(stack.metadata.lore, ["soft"])

    def test_bad_templates_yield_none(self):
        self.assertIsNone(ItemFactory.from_dict(None))
        self.assertIsNone(ItemFactory.from_dict({"amount": 3}))
        self.assertIsNone(ItemFactory.from_dict({"type_id": "stone", "amount": -1}))
        self.assertLogContains("Template without type_id ignored")
        self.assertLogContains("Could not create stack 'stone'")

    def test_demo_templates_build(self):
        slots = ItemFactory.create_slots(DEMO_CHEST_TEMPLATES)
        self.assertEqual(len(slots), len(DEMO_CHEST_TEMPLATES))
        self.assertEqual(sum(1 for s in slots if s is None), DEMO_CHEST_TEMPLATES.count(None))


class TestItemStack(SortTestBase):

    def test_validation(self):
        with self.assertRaises(ValueError):
            ItemStack("")
        with self.assertRaises(ValueError):
            ItemStack("minecraft:stone", amount=-1)
        with self.assertRaises(ValueError):
            ItemStack("minecraft:stone", max_amount=0)

    def test_clone_copies_metadata(self):
        stack = self.stack("stick", 3, lore=["a"])
        copy = stack.clone(amount=1)
        copy.metadata.lore.append("b")
        self.assertEqual(copy.amount, 1)
        self.assertEqual(stack.amount, 3)
        self.assertEqual(stack.metadata.lore, ["a"])

    def test_names(self):
        stack = self.stack("oak_log", 12)
        self.assertEqual(stack.short_id, "oak_log")
        self.assertEqual(stack.display_name, "Oak Log")
        self.assertEqual(str(stack), "minecraft:oak_log:0 x12")

    def test_metadata_to_dict(self):
        metadata = ItemMetadata(potion_effects=[PotionEffect("speed", 1, 20)], custom_name="Zoom")
        self.assertFalse(metadata.is_empty())
        self.assertTrue(ItemMetadata().is_empty())
        self.assertEqual(metadata.to_dict(), {
            "custom_name": "Zoom",
            "potion_effects": [{"effect": "speed", "amplifier": 1, "duration": 20}],
        })
        self.assertEqual(ItemMetadata.from_dict({"unknown": 1, "map_id": 3}), ItemMetadata(map_id=3))


class TestInventory(SortTestBase):

    def test_slots_hold_private_copies(self):
        inv = Inventory(max_slots=2)
        stack = self.stack("stick", 1, lore=["a"])
        inv.write_slot(0, stack)
        stack.metadata.lore.append("b")
        inv.read_slot(0).metadata.lore.append("c")
        self.assertEqual(inv.read_slot(0).metadata.lore, ["a"])

    def test_empty_stacks_are_rejected(self):
        slot = InventorySlot()
        with self.assertRaises(ValueError):
            slot.put(self.stack("stone", 1).clone(amount=0))
        self.assertTrue(slot.is_empty)

    def test_oversized_stack_fits_one_slot(self):
        inv = self.chest([self.stack("bread", 70)])
        self.assertEqual(inv.read_slot(0).amount, 70)

    def test_queries(self):
        inv = self.chest([self.stack("wool", 3, data=14), None, self.stack("wool", 4), self.stack("apple", 2)])
        self.assertEqual(inv.size, 4)
        self.assertEqual(inv.get_empty_slots(), 1)
        self.assertEqual(self.count(inv, "minecraft:wool"), 7)
        self.assertEqual(self.count(inv, "minecraft:wool", data=14), 3)

    def test_clear_all(self):
        inv = self.chest([self.stack("apple", 1), self.stack("bread", 1)])
        inv.clear_all()
        self.assertEqual(self.layout(inv), [None, None])
        self.assertIn("(Empty)", inv.list_items())

    def test_needs_a_slot(self):
        with self.assertRaises(ValueError):
            Inventory(max_slots=0)
