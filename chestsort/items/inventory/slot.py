# chestsort/items/inventory/slot.py
from typing import Optional

from chestsort.items.item_stack import ItemStack

class InventorySlot:
    """Represents a single slot in an inventory that can hold one stack."""

    def __init__(self, stack: Optional[ItemStack] = None):
        self.stack: Optional[ItemStack] = None
        if stack:
            self.put(stack)

    @property
    def is_empty(self) -> bool:
        return self.stack is None

    def put(self, stack: ItemStack) -> None:
        """Stores a private copy so callers cannot alias slot contents."""
        if stack.amount < 1:
            raise ValueError(f"Cannot place an empty stack of {stack.type_id} in a slot.")
        self.stack = stack.clone()

    def take(self) -> Optional[ItemStack]:
        """Returns a copy of the contents, or None if empty."""
        return self.stack.clone() if self.stack else None

    def clear(self) -> None:
        self.stack = None
