# chestsort/core/merger.py
"""
Merges fungible stacks into groups and lays the groups back out into slots.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from chestsort.core.canonicalizer import canonicalize
from chestsort.items.item_stack import ItemStack
from chestsort.utils.logger import Logger

@dataclass
class MergedGroup:
    key: str
    prototype: ItemStack # zero-quantity template carrying the metadata
    total_quantity: int = 0
    max_stack_size: int = 1

    @property
    def stacks_needed(self) -> int:
        return -(-self.total_quantity // self.max_stack_size)


def merge(stacks: Iterable[Optional[ItemStack]]) -> Dict[str, MergedGroup]:
    """
    Sums quantities per canonical key. The first stack seen for a key becomes
    the group's prototype and sets its max stack size. Empty slots are skipped.
    """
    groups: Dict[str, MergedGroup] = {}
    for stack in stacks:
        if not stack or stack.amount <= 0:
            continue
        key = canonicalize(stack)
        group = groups.get(key)
        if group is None:
            group = MergedGroup(key=key, prototype=stack.clone(amount=0), max_stack_size=stack.max_amount)
            groups[key] = group
        group.total_quantity += stack.amount
    return groups


def required_slots(groups: Mapping[str, MergedGroup]) -> int:
    """Slots needed to hold every group at its max stack size."""
    return sum(group.stacks_needed for group in groups.values())


def redistribute(groups: Mapping[str, MergedGroup], slot_count: int,
                 order: Sequence[str]) -> List[Optional[ItemStack]]:
    """
    Emits full stacks per group in `order` until each group is exhausted or all
    `slot_count` slots are used. Anything that does not fit is left out of the result.
    """
    final: List[Optional[ItemStack]] = [None] * slot_count
    idx = 0
    for key in order:
        group = groups[key]
        left = group.total_quantity
        while left > 0 and idx < slot_count:
            amount = min(left, group.max_stack_size)
            final[idx] = group.prototype.clone(amount=amount)
            idx += 1
            left -= amount
        if left > 0:
            Logger.warning("Merger", f"No room for {left} of {key}; left out of the layout.")
    return final


def overflow_by_key(groups: Mapping[str, MergedGroup], slot_count: int,
                    order: Sequence[str]) -> Dict[str, int]:
    """Quantity per key that redistribute() would leave out for the same inputs."""
    dropped: Dict[str, int] = {}
    free = slot_count
    for key in order:
        group = groups[key]
        used = min(group.stacks_needed, free)
        free -= used
        left = group.total_quantity - used * group.max_stack_size
        if left > 0:
            dropped[key] = left
    return dropped
