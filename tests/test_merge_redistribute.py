# tests/test_merge_redistribute.py
from tests.fixtures import SortTestBase
from chestsort.core.canonicalizer import canonicalize
from chestsort.core.merger import merge, overflow_by_key, redistribute, required_slots

APPLE = "minecraft:apple:0"
BREAD = "minecraft:bread:0"

class TestMerge(SortTestBase):

    def setUp(self):
        super().setUp()
        self.stacks = [self.stack("apple", 3), self.stack("bread", 70), None,
                       self.stack("apple", 2), None]

    def test_groups_sum_quantities(self):
        groups = merge(self.stacks)
        self.assertEqual(list(groups.keys()), [APPLE, BREAD]) # first occurrence order
        self.assertEqual(groups[APPLE].total_quantity, 5)
        self.assertEqual(groups[BREAD].total_quantity, 70)

    def test_total_quantity_is_preserved(self):
        groups = merge(self.stacks)
        self.assertEqual(sum(g.total_quantity for g in groups.values()),
                         sum(s.amount for s in self.stacks if s))

    def test_prototype_is_zero_quantity_copy(self):
        groups = merge(self.stacks)
        prototype = groups[APPLE].prototype
        self.assertEqual(prototype.amount, 0)
        self.assertEqual(prototype.type_id, "minecraft:apple")
        self.assertEqual(groups[BREAD].max_stack_size, 64)

    def test_prototype_does_not_share_metadata(self):
        original = self.stack("stick", 1, lore=["old"])
        groups = merge([original])
        original.metadata.lore.append("changed")
        self.assertEqual(groups[canonicalize(self.stack("stick", lore=["old"]))].prototype.metadata.lore, ["old"])

    def test_first_occurrence_sets_max_stack_size(self):
        first = self.stack("snowball", 4, max_amount=16)
        second = self.stack("snowball", 4, max_amount=64)
        groups = merge([first, second])
        self.assertEqual(groups["minecraft:snowball:0"].max_stack_size, 16)
        self.assertEqual(groups["minecraft:snowball:0"].total_quantity, 8)

    def test_empty_input(self):
        self.assertEqual(merge([None, None]), {})
        self.assertEqual(required_slots({}), 0)

    def test_enchanted_books_in_any_order_merge(self):
        a = self.stack("enchanted_book", 1, enchantments=[{"id": "sharpness", "level": 3}, {"id": "unbreaking", "level": 2}])
        b = self.stack("enchanted_book", 1, enchantments=[{"id": "unbreaking", "level": 2}, {"id": "sharpness", "level": 3}])
        groups = merge([a, None, b])
        self.assertEqual(len(groups), 1)
        self.assertEqual(next(iter(groups.values())).total_quantity, 2)


class TestRedistribute(SortTestBase):

    def test_packs_full_stacks_in_order(self):
        stacks = [self.stack("apple", 3), self.stack("bread", 70), None, self.stack("apple", 2), None]
        groups = merge(stacks)
        final = redistribute(groups, 5, [APPLE, BREAD])
        self.assertEqual([(s.type_id, s.amount) if s else None for s in final],
                         [("minecraft:apple", 5), ("minecraft:bread", 64), ("minecraft:bread", 6), None, None])

    def test_output_length_matches_slot_count(self):
        groups = merge([self.stack("apple", 1)])
        self.assertEqual(len(redistribute(groups, 9, [APPLE])), 9)

    def test_unstackable_items_take_one_slot_each(self):
        groups = merge([self.stack("potion", 1, potion_effects=[{"effect": "speed"}]),
                        self.stack("potion", 1, potion_effects=[{"effect": "speed"}])])
        key = next(iter(groups))
        self.assertEqual([s.amount if s else None for s in redistribute(groups, 3, [key])], [1, 1, None])

    def test_emitted_stacks_keep_metadata(self):
        groups = merge([self.stack("diamond", 2, custom_name="Shiny")])
        final = redistribute(groups, 1, list(groups))
        self.assertEqual(final[0].metadata.custom_name, "Shiny")

    def test_overflow_is_left_out(self):
        """More stacks than slots: the excess is absent from the layout and reported by overflow_by_key."""
        groups = merge([self.stack("ender_pearl", 20), self.stack("ender_pearl", 20)])
        key = "minecraft:ender_pearl:0"
        self.assertEqual(required_slots(groups), 3)
        final = redistribute(groups, 2, [key])
        self.assertEqual([s.amount for s in final], [16, 16])
        self.assertEqual(overflow_by_key(groups, 2, [key]), {key: 8})
        self.assertLogContains("No room for 8")

    def test_overflow_skips_later_groups_entirely(self):
        groups = merge([self.stack("apple", 64), self.stack("bread", 10)])
        self.assertEqual(overflow_by_key(groups, 1, [APPLE, BREAD]), {BREAD: 10})
        self.assertEqual(overflow_by_key(groups, 2, [APPLE, BREAD]), {})
