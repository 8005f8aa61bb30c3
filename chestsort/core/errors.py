# chestsort/core/errors.py
"""Exceptions raised by the sorting engine."""

class ChestSortError(Exception):
    """Base class for sorting engine errors."""

class SortModeError(ChestSortError, ValueError):
    """Raised for a sorting mode outside SORT_MODES."""

    def __init__(self, mode: str):
        super().__init__(f"Unknown sorting mode '{mode}'.")
        self.mode = mode
