# chestsort/core/ordering.py
from typing import Callable, Dict, List, Mapping, Tuple

from chestsort.config import SORT_MODE_ALPHA, SORT_MODE_COUNT, SORT_MODE_TYPE, SORT_MODES
from chestsort.core.errors import SortModeError
from chestsort.core.merger import MergedGroup

# Keys are unique per group, so every order below is total.
def _alpha_key(group: MergedGroup) -> Tuple:
    return (group.key,)

def _count_key(group: MergedGroup) -> Tuple:
    return (-group.total_quantity, group.key)

def _type_key(group: MergedGroup) -> Tuple:
    return (group.prototype.type_id, group.key)

ORDERING_KEYS: Dict[str, Callable[[MergedGroup], Tuple]] = {
    SORT_MODE_ALPHA: _alpha_key,
    SORT_MODE_COUNT: _count_key,
    SORT_MODE_TYPE: _type_key,
}

class OrderingPolicy:
    """Orders merged groups for placement: alpha by key, count descending, or type then key."""

    @staticmethod
    def validate_mode(mode: str) -> str:
        if mode not in SORT_MODES:
            raise SortModeError(mode)
        return mode

    @staticmethod
    def order(groups: Mapping[str, MergedGroup], mode: str = SORT_MODE_ALPHA) -> List[str]:
        sort_key = ORDERING_KEYS[OrderingPolicy.validate_mode(mode)]
        return [group.key for group in sorted(groups.values(), key=sort_key)]
