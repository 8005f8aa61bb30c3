# chestsort/core/container_adapter.py
"""
The narrow slot interface the sorting engine reads and writes through.
Hosts wrap their storage in a subclass; the engine never touches storage directly.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from chestsort.items.item_stack import ItemStack

class ContainerAdapter(ABC):

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of slots."""

    @abstractmethod
    def read_slot(self, index: int) -> Optional[ItemStack]:
        """Returns the stack in `index`, or None for an empty slot."""

    @abstractmethod
    def clear_all(self) -> None:
        """Empties every slot."""

    @abstractmethod
    def write_slot(self, index: int, stack: ItemStack) -> None:
        """Places `stack` in `index`, replacing whatever was there."""

    def is_usable(self) -> bool:
        """False while the backing storage cannot be accessed (e.g. unloaded chunk)."""
        return True

    def read_all(self) -> List[Optional[ItemStack]]:
        return [self.read_slot(i) for i in range(self.size)]
