# chestsort/items/inventory/core.py
from typing import List, Optional, Sequence

from chestsort.config import DEFAULT_CONTAINER_SIZE
from chestsort.core.container_adapter import ContainerAdapter
from chestsort.items.item_stack import ItemStack
from .display import InventoryDisplayMixin
from .slot import InventorySlot

class Inventory(InventoryDisplayMixin, ContainerAdapter):
    """
    Manages a fixed number of slots holding item stacks.
    The display mixin handles text listings.
    """

    def __init__(self, max_slots: int = DEFAULT_CONTAINER_SIZE, name: str = "Chest"):
        if max_slots < 1:
            raise ValueError("An inventory needs at least one slot.")
        self.slots: List[InventorySlot] = [InventorySlot() for _ in range(max_slots)]
        self.name = name
        self.usable = True

    @classmethod
    def from_stacks(cls, stacks: Sequence[Optional[ItemStack]], name: str = "Chest") -> 'Inventory':
        inventory = cls(max_slots=len(stacks), name=name)
        for i, stack in enumerate(stacks):
            if stack:
                inventory.write_slot(i, stack)
        return inventory

    # --- ContainerAdapter ---
    @property
    def size(self) -> int:
        return len(self.slots)

    def read_slot(self, index: int) -> Optional[ItemStack]:
        return self.slots[index].take()

    def clear_all(self) -> None:
        for slot in self.slots:
            slot.clear()

    def write_slot(self, index: int, stack: ItemStack) -> None:
        self.slots[index].put(stack)

    def is_usable(self) -> bool:
        return self.usable

    # --- Queries ---
    def get_empty_slots(self) -> int:
        return sum(1 for slot in self.slots if slot.is_empty)

