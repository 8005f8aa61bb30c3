# chestsort/items/item_factory.py
from typing import Any, Dict, Iterable, List, Optional

from chestsort.config import (
    DEFAULT_MAX_STACK_SIZE, ITEM_NAMESPACE, MAX_STACK_SIZE_OVERRIDES, UNSTACKABLE_SUFFIXES
)
from chestsort.items.item_stack import ItemMetadata, ItemStack
from chestsort.utils.logger import Logger

CORE_STACK_KEYS = {"type_id", "id", "amount", "data", "max_amount"}

class ItemFactory:
    """Factory class for creating item stacks from templates or data."""

    @staticmethod
    def normalize_type_id(type_id: str) -> str:
        """Adds the default namespace to bare ids ('stone' -> 'minecraft:stone')."""
        type_id = type_id.strip().lower()
        return type_id if ":" in type_id else f"{ITEM_NAMESPACE}{type_id}"

    @staticmethod
    def get_max_stack_size(type_id: str) -> int:
        full_id = ItemFactory.normalize_type_id(type_id)
        if not full_id.startswith(ITEM_NAMESPACE):
            return DEFAULT_MAX_STACK_SIZE
        short_id = full_id[len(ITEM_NAMESPACE):]
        if short_id in MAX_STACK_SIZE_OVERRIDES:
            return MAX_STACK_SIZE_OVERRIDES[short_id]
        if short_id.endswith(UNSTACKABLE_SUFFIXES):
            return 1
        return DEFAULT_MAX_STACK_SIZE

    @staticmethod
    def create_stack(type_id: str, amount: int = 1, data: int = 0,
                     max_amount: Optional[int] = None, **metadata) -> ItemStack:
        """
        Creates a stack. Extra keyword arguments are metadata fields
        (custom_name, lore, enchantments, potion_effects, ...).
        """
        full_id = ItemFactory.normalize_type_id(type_id)
        if max_amount is None:
            max_amount = ItemFactory.get_max_stack_size(full_id)
        return ItemStack(type_id=full_id, amount=amount, max_amount=max_amount,
                         data=data, metadata=ItemMetadata.from_dict(metadata))

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> Optional[ItemStack]:
        """Create a stack from a template dict. Bad templates log a warning and yield None."""
        if not data:
            return None
        type_id = data.get("type_id", data.get("id"))
        if not type_id:
            Logger.warning("ItemFactory", f"Template without type_id ignored: {data}")
            return None
        metadata = {k: v for k, v in data.items() if k not in CORE_STACK_KEYS}
        try:
            return ItemFactory.create_stack(
                type_id,
                amount=int(data.get("amount", 1)),
                data=int(data.get("data", 0)),
                max_amount=data.get("max_amount"),
                **metadata
            )
        except (TypeError, ValueError) as e:
            Logger.warning("ItemFactory", f"Could not create stack '{type_id}': {e}")
            return None

    @staticmethod
    def create_slots(templates: Iterable[Optional[Dict[str, Any]]]) -> List[Optional[ItemStack]]:
        """One entry per slot; None or unusable templates leave the slot empty."""
        return [ItemFactory.from_dict(t) for t in templates]
