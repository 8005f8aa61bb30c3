# chestsort/core/sorter.py
"""
Reconciliation: the single entry point that sorts one container.

Three phases, each usable on its own:
  compute  - snapshot -> merge -> order -> layout (no side effects)
  commit   - clear the container and write the layout
  verify   - compare before/after as multisets; roll back on any difference
The container ends every call either sorted and verified, or exactly as it was.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from chestsort.config import (
    CAPACITY_PRECHECK, DIAGNOSTIC_REASON_CAPACITY, DIAGNOSTIC_REASON_SIZE_CHANGED,
    DIAGNOSTIC_REASON_WRITE_ERROR, EVENT_SORT_ABORTED, EVENT_SORT_FAILED,
    EVENT_SORT_ROLLED_BACK, EVENT_SORT_STARTED, EVENT_SORT_SUCCEEDED
)
from chestsort.core.container_adapter import ContainerAdapter
from chestsort.core.event_system import EventSystem
from chestsort.core.merger import MergedGroup, merge, overflow_by_key, redistribute
from chestsort.core.ordering import OrderingPolicy
from chestsort.core.settings import SortSettings
from chestsort.core.verifier import Diagnostic, Snapshot, rollback, snapshot, verify
from chestsort.items.item_stack import ItemStack
from chestsort.utils.logger import Logger

STATUS_SORTED = "sorted"
STATUS_ROLLED_BACK = "rolled_back"
STATUS_ABORTED = "aborted"

DIAGNOSTIC_REASON_UNUSABLE = "unusable"
UNUSABLE_MESSAGE = "Container invalid / chunk not loaded"

@dataclass
class ReconcileResult:
    success: bool
    diagnostic: Optional[Diagnostic] = None
    mode: str = ""
    status: str = STATUS_SORTED

    @property
    def rolled_back(self) -> bool:
        return self.status == STATUS_ROLLED_BACK

@dataclass
class SortPlan:
    groups: Dict[str, MergedGroup]
    order: List[str]
    layout: List[Optional[ItemStack]]
    overflow: Dict[str, int] = field(default_factory=dict)

    @property
    def fits(self) -> bool:
        return not self.overflow


def compute(before: Snapshot, mode: str) -> SortPlan:
    """Builds the target layout for `before` without touching any container."""
    groups = merge(before)
    order = OrderingPolicy.order(groups, mode)
    return SortPlan(groups=groups, order=order,
                    layout=redistribute(groups, len(before), order),
                    overflow=overflow_by_key(groups, len(before), order))


def commit(container: ContainerAdapter, layout: List[Optional[ItemStack]]) -> None:
    """Clears the container, then writes every non-empty slot of `layout`."""
    container.clear_all()
    for i, stack in enumerate(layout):
        if stack:
            container.write_slot(i, stack)


def _publish(events: Optional[EventSystem], event_type: str, data) -> None:
    if events:
        events.publish(event_type, data)


def reconcile(container: ContainerAdapter, settings: Optional[SortSettings] = None,
              events: Optional[EventSystem] = None,
              capacity_precheck: bool = CAPACITY_PRECHECK) -> ReconcileResult:
    """
    Sorts `container` according to `settings.sorting_mode`.

    Returns a successful result when the new layout was written and verified.
    On an unusable container or a layout that cannot hold everything, nothing
    is written. On any count mismatch after writing, the original layout is
    restored and the result carries the per-key deltas.
    """
    settings = settings or SortSettings()
    mode = settings.sorting_mode

    if not container.is_usable():
        Logger.warning("Sorter", "Container is not usable; sort aborted before reading.")
        result = ReconcileResult(False, Diagnostic(reason=DIAGNOSTIC_REASON_UNUSABLE, detail=UNUSABLE_MESSAGE),
                                 mode, STATUS_ABORTED)
        _publish(events, EVENT_SORT_ABORTED, result)
        return result

    size = container.size
    before = snapshot(container)
    _publish(events, EVENT_SORT_STARTED, {"size": size, "mode": mode})

    # --- Compute ---
    plan = compute(before, mode)
    Logger.debug("Sorter", f"{len(plan.groups)} groups over {size} slots, mode={mode}.")
    if capacity_precheck and not plan.fits:
        diagnostic = Diagnostic(deltas=plan.overflow, reason=DIAGNOSTIC_REASON_CAPACITY,
                                detail=f"not enough slots ({size}) for the merged stacks")
        Logger.warning("Sorter", f"Sort aborted: {diagnostic.describe()}")
        result = ReconcileResult(False, diagnostic, mode, STATUS_ABORTED)
        _publish(events, EVENT_SORT_ABORTED, result)
        return result

    # --- Commit ---
    write_error: Optional[str] = None
    try:
        commit(container, plan.layout)
    except Exception as e:
        Logger.exception("Sorter", f"Write failed during commit: {e}")
        write_error = f"write failed: {e}"

    # --- Verify ---
    diagnostic: Optional[Diagnostic]
    if container.size != size:
        diagnostic = Diagnostic(reason=DIAGNOSTIC_REASON_SIZE_CHANGED,
                                detail=f"container size changed from {size} to {container.size}")
    else:
        diagnostic = verify(before, snapshot(container))
        if write_error:
            deltas = diagnostic.deltas if diagnostic else {}
            diagnostic = Diagnostic(deltas=deltas, reason=DIAGNOSTIC_REASON_WRITE_ERROR, detail=write_error)

    if diagnostic is None:
        Logger.info("Sorter", f"Container sorted ({mode}).")
        result = ReconcileResult(True, None, mode, STATUS_SORTED)
        _publish(events, EVENT_SORT_SUCCEEDED, result)
        return result

    # --- Rollback ---
    Logger.warning("Sorter", f"Sorting failed - {diagnostic.describe()}")
    try:
        rollback(container, before)
    except Exception:
        Logger.critical("Sorter", "Rollback raised; container contents are unverified.")
        raise
    if container.size == size and snapshot(container) != before:
        Logger.critical("Sorter", "Rollback did not restore the original layout.")
    result = ReconcileResult(False, diagnostic, mode, STATUS_ROLLED_BACK)
    _publish(events, EVENT_SORT_ROLLED_BACK, before)
    _publish(events, EVENT_SORT_FAILED, result)
    return result
