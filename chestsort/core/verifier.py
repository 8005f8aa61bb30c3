# chestsort/core/verifier.py
"""
Snapshot, verification and rollback.

Verification compares two snapshots as multisets of (canonical key, quantity);
slot positions are ignored because sorting moves everything on purpose.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from chestsort.config import DIAGNOSTIC_REASON_MISMATCH
from chestsort.core.canonicalizer import canonicalize
from chestsort.core.container_adapter import ContainerAdapter
from chestsort.items.item_stack import ItemStack
from chestsort.utils.logger import Logger

Snapshot = Tuple[Optional[ItemStack], ...]

@dataclass
class Diagnostic:
    """
    Per-key signed deltas, `before - after`. A positive delta means items of
    that key went missing; a negative one means items appeared.
    """
    deltas: Dict[str, int] = field(default_factory=dict)
    reason: str = DIAGNOSTIC_REASON_MISMATCH
    detail: str = ""

    @property
    def net_loss(self) -> int:
        return sum(self.deltas.values())

    def describe(self) -> str:
        parts = [f"{key} net {'+' if delta > 0 else ''}{delta}" for key, delta in self.deltas.items()]
        text = ", ".join(parts)
        if self.detail:
            text = f"{self.detail}; {text}" if text else self.detail
        return text or self.reason

    def __str__(self) -> str:
        return self.describe()


def snapshot(container: ContainerAdapter) -> Snapshot:
    """Copies every slot; later writes to the container never reach the snapshot."""
    return tuple(stack.clone() if stack else None for stack in container.read_all())


def tally(before: Iterable[Optional[ItemStack]], after: Iterable[Optional[ItemStack]]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for stack in before:
        if stack:
            key = canonicalize(stack)
            counts[key] = counts.get(key, 0) + stack.amount
    for stack in after:
        if stack:
            key = canonicalize(stack)
            counts[key] = counts.get(key, 0) - stack.amount
    return counts


def verify(before: Iterable[Optional[ItemStack]], after: Iterable[Optional[ItemStack]]) -> Optional[Diagnostic]:
    """None when both sides hold the same quantity of every key, otherwise the discrepancies."""
    problems = {key: delta for key, delta in sorted(tally(before, after).items()) if delta != 0}
    if not problems:
        return None
    return Diagnostic(deltas=problems)


def rollback(container: ContainerAdapter, before: Snapshot) -> None:
    """Restores `before` slot for slot."""
    Logger.warning("IntegrityVerifier", f"Rolling back {len(before)} slots to the pre-sort layout.")
    container.clear_all()
    size = container.size
    for i, stack in enumerate(before):
        if not stack:
            continue
        if i >= size:
            Logger.error("IntegrityVerifier", f"Slot {i} no longer exists; cannot restore {stack}.")
            continue
        container.write_slot(i, stack.clone())
