# tests/fixtures.py
import io
import os
import sys
import unittest
from typing import List, Optional, Sequence

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'chestsort'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from chestsort.config import FORMAT_CODE_PATTERN
from chestsort.core.settings import SortSettings
from chestsort.core.sort_manager import SortManager
from chestsort.items.inventory import Inventory
from chestsort.items.item_factory import ItemFactory
from chestsort.items.item_stack import ItemStack
from chestsort.player import Player
from chestsort.utils.logger import Logger, LogLevel


class DroppingInventory(Inventory):
    """
    Simulates storage that loses items: the first write of `type_id` during
    a sort keeps `drop` fewer units than requested. Later writes (the rollback)
    are faithful.
    """

    def __init__(self, max_slots: int, type_id: str, drop: int = 1):
        super().__init__(max_slots=max_slots)
        self.target_type_id = type_id
        self.drop = drop
        self.armed = False
        self.dropped = 0

    def clear_all(self) -> None:
        super().clear_all()
        # The first clear starts the sort's commit phase.
        if not self.armed and self.dropped == 0:
            self.armed = True

    def write_slot(self, index: int, stack: ItemStack) -> None:
        if self.armed and stack.type_id == self.target_type_id:
            self.armed = False
            self.dropped = self.drop
            if stack.amount - self.drop < 1:
                return # the whole stack vanishes
            stack = stack.clone(amount=stack.amount - self.drop)
        super().write_slot(index, stack)


class RejectingInventory(Inventory):
    """Raises on the n-th write after the sort clears the slots, then behaves."""

    def __init__(self, max_slots: int, fail_on_write: int = 1):
        super().__init__(max_slots=max_slots)
        self.fail_on_write = fail_on_write
        self.sorting = False
        self.writes = 0
        self.failed = False

    def clear_all(self) -> None:
        super().clear_all()
        self.sorting = True

    def write_slot(self, index: int, stack: ItemStack) -> None:
        if self.sorting and not self.failed:
            self.writes += 1
            if self.writes == self.fail_on_write:
                self.failed = True
                raise IOError("slot write rejected by storage")
        super().write_slot(index, stack)


class ShrinkingInventory(Inventory):
    """Loses its last slot the first time it is cleared."""

    def __init__(self, max_slots: int):
        super().__init__(max_slots=max_slots)
        self.shrunk = False

    def clear_all(self) -> None:
        super().clear_all()
        if not self.shrunk:
            self.shrunk = True
            self.slots = self.slots[:-1]



class SortTestBase(unittest.TestCase):
    """Base class for sorting tests."""

    def setUp(self):
        # Keep test output clean; individual tests can lower the level.
        self.log_stream = io.StringIO()
        Logger.set_stream(self.log_stream)
        Logger.set_level(LogLevel.DEBUG)

        self.settings = SortSettings()
        self.manager = SortManager(self.settings)
        self.player = Player("Alex", is_sneaking=True)
        self.manager.join(self.player)

    def tearDown(self):
        Logger.set_stream(None)
        Logger.set_level(LogLevel.INFO)

    # --- Builders ---
    def stack(self, type_id: str, amount: int = 1, **kwargs) -> ItemStack:
        return ItemFactory.create_stack(type_id, amount, **kwargs)

    def chest(self, stacks: Sequence[Optional[ItemStack]]) -> Inventory:
        return Inventory.from_stacks(list(stacks))

    def fill(self, inventory: Inventory, stacks: Sequence[Optional[ItemStack]]) -> Inventory:
        for i, stack in enumerate(stacks):
            if stack:
                inventory.write_slot(i, stack)
        return inventory

    # --- Assertions ---
    def layout(self, inventory: Inventory) -> List[Optional[tuple]]:
        """(type_id, data, amount) per slot, None for empty slots."""
        return [(s.type_id, s.data, s.amount) if s else None for s in inventory.read_all()]

    def count(self, inventory: Inventory, type_id: Optional[str] = None, data: Optional[int] = None) -> int:
        """Total quantity in `inventory`, optionally limited to one type and sub-variant."""
        return sum(s.amount for s in inventory.read_all()
                   if s and (type_id is None or s.type_id == type_id) and (data is None or s.data == data))

    def plain(self, text: Optional[str]) -> str:
        return FORMAT_CODE_PATTERN.sub("", text or "")

    def assertLogContains(self, substring: str):
        self.assertIn(substring, self.log_stream.getvalue(), f"Expected log text '{substring}' not found.")
