# chestsort/core/settings.py
from dataclasses import dataclass, replace

from chestsort.config import (
    DEFAULT_ALLOW_SORT_WITHOUT_SNEAK, DEFAULT_SORT_MODE, DEFAULT_VERBOSE, SORT_MODES
)
from chestsort.core.errors import SortModeError

@dataclass(frozen=True)
class SortSettings:
    """
    Per-invocation configuration. Never mutated: toggles build a new value,
    so a sort that is already scheduled keeps the settings it was given.
    """
    sorting_mode: str = DEFAULT_SORT_MODE
    verbose: bool = DEFAULT_VERBOSE
    allow_sort_without_sneak: bool = DEFAULT_ALLOW_SORT_WITHOUT_SNEAK

    def __post_init__(self):
        if self.sorting_mode not in SORT_MODES:
            raise SortModeError(self.sorting_mode)

    def with_mode(self, mode: str) -> 'SortSettings':
        return replace(self, sorting_mode=mode.lower())

    def with_verbose(self, verbose: bool) -> 'SortSettings':
        return replace(self, verbose=verbose)

    def with_sneak_bypass(self, allowed: bool) -> 'SortSettings':
        return replace(self, allow_sort_without_sneak=allowed)
