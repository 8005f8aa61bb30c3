# chestsort/__init__.py
"""
ChestSort.
Merges, orders and verifies the contents of slotted containers.
"""
__version__ = "1.0.0"
