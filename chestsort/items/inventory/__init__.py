# chestsort/items/inventory/__init__.py
"""
Inventory Package.
In-memory slotted container implementing the engine's ContainerAdapter.
"""
from .slot import InventorySlot
from .core import Inventory
