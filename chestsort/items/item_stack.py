# chestsort/items/item_stack.py
import copy
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

from chestsort.config import ITEM_NAMESPACE

@dataclass(frozen=True)
class Enchantment:
    id: str
    level: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "level": self.level}

@dataclass(frozen=True)
class PotionEffect:
    effect: str
    amplifier: int = 0
    duration: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"effect": self.effect, "amplifier": self.amplifier, "duration": self.duration}

@dataclass
class ItemMetadata:
    """
    Optional attachments carried by a stack. A field left as None is absent.
    The structured bags (book, banner, container, head, map, fireworks) are plain
    JSON-like values; their key order never matters.
    """
    custom_name: Optional[str] = None
    lore: Optional[List[str]] = None
    enchantments: Optional[List[Enchantment]] = None
    potion_effects: Optional[List[PotionEffect]] = None
    book_contents: Optional[Dict[str, Any]] = None
    banner_patterns: Optional[List[Any]] = None
    container_contents: Optional[List[Any]] = None
    head_owner: Optional[Any] = None
    map_id: Optional[Any] = None
    fireworks: Optional[Dict[str, Any]] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """Present fields only; typed entries become plain dicts."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name in ("enchantments", "potion_effects"):
                value = [entry.to_dict() if isinstance(entry, (Enchantment, PotionEffect)) else entry for entry in value]
            data[f.name] = copy.deepcopy(value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemMetadata':
        kwargs: Dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known or value is None:
                continue
            if key == "enchantments":
                value = [Enchantment(**e) if isinstance(e, dict) else e for e in value]
            elif key == "potion_effects":
                value = [PotionEffect(**p) if isinstance(p, dict) else p for p in value]
            elif key == "lore" and isinstance(value, str):
                value = [value]
            kwargs[key] = value
        return cls(**kwargs)

@dataclass(frozen=True)
class ItemStack:
    """A quantity of one item variant, as read from a container slot."""
    type_id: str
    amount: int = 1
    max_amount: int = 64
    data: int = 0
    metadata: ItemMetadata = field(default_factory=ItemMetadata)

    def __post_init__(self):
        if not self.type_id:
            raise ValueError("ItemStack requires a type_id.")
        # Zero is allowed for merge prototypes; containers reject it on write.
        if self.amount < 0:
            raise ValueError(f"ItemStack amount must not be negative (got {self.amount}).")
        if self.max_amount < 1:
            raise ValueError(f"ItemStack max_amount must be positive (got {self.max_amount}).")

    @property
    def short_id(self) -> str:
        """type_id without the namespace prefix."""
        if self.type_id.startswith(ITEM_NAMESPACE):
            return self.type_id[len(ITEM_NAMESPACE):]
        return self.type_id.split(":", 1)[-1]

    @property
    def display_name(self) -> str:
        if self.metadata.custom_name:
            return self.metadata.custom_name
        return self.short_id.replace("_", " ").title()

    def clone(self, amount: Optional[int] = None) -> 'ItemStack':
        """Copy with its own metadata; `amount` replaces the quantity when given."""
        return replace(self,
                       amount=self.amount if amount is None else amount,
                       metadata=copy.deepcopy(self.metadata))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type_id": self.type_id,
            "data": self.data,
            "amount": self.amount,
            "max_amount": self.max_amount,
        }
        data.update(self.metadata.to_dict())
        return data

    def __str__(self) -> str:
        return f"{self.type_id}:{self.data} x{self.amount}"
