# chestsort/items/inventory/display.py
from typing import TYPE_CHECKING, cast

from chestsort.config import (
    CONTAINER_EMPTY_MESSAGE, FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET
)

if TYPE_CHECKING:
    from chestsort.items.inventory.core import Inventory

class InventoryDisplayMixin:
    """Mixin for generating text representations of the inventory."""

    def list_items(self, show_empty: bool = False) -> str:
        # Cast self to Inventory to satisfy static analysis
        inventory = cast('Inventory', self)

        if all(slot.is_empty for slot in inventory.slots):
            return f"{FORMAT_CATEGORY}{inventory.name}:{FORMAT_RESET}\n{CONTAINER_EMPTY_MESSAGE}"

        result = [f"{FORMAT_CATEGORY}{inventory.name}:{FORMAT_RESET}"]
        for i, slot in enumerate(inventory.slots):
            stack = slot.stack
            if not stack:
                if show_empty:
                    result.append(f"  [{i:>2}] -")
                continue
            line = f"  [{i:>2}] {FORMAT_HIGHLIGHT}{stack.display_name}{FORMAT_RESET}"
            if stack.data:
                line += f" ({stack.data})"
            line += f" x{stack.amount}"
            if stack.metadata.enchantments:
                line += " *"
            result.append(line)

        used = inventory.size - inventory.get_empty_slots()
        percent = (used / inventory.size) * 100
        slot_text = f"{used}/{inventory.size}"
        if percent >= 90:
            slot_text = f"{FORMAT_ERROR}{slot_text}{FORMAT_RESET}"
        elif percent >= 75:
            slot_text = f"{FORMAT_HIGHLIGHT}{slot_text}{FORMAT_RESET}"
        result.append(f"\n{FORMAT_CATEGORY}Slots used:{FORMAT_RESET} {slot_text}")
        return "\n".join(result)
