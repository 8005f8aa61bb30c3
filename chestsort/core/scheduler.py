# chestsort/core/scheduler.py
from typing import Any, Callable, List, Tuple

from chestsort.utils.logger import Logger

class TickScheduler:
    """
    Defers work to the next tick. Interaction events fire while the host is
    still processing the click; queued jobs run once the host calls tick(),
    after its writes are committed.
    """

    def __init__(self):
        self._queue: List[Tuple[Callable[..., Any], tuple]] = []
        self.current_tick = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run(self, callback: Callable[..., Any], *args) -> None:
        """Queues callback(*args) for the next tick."""
        self._queue.append((callback, args))

    def tick(self) -> int:
        """Runs every job queued before this call. Jobs queued meanwhile wait for the next tick."""
        self.current_tick += 1
        jobs, self._queue = self._queue, []
        for callback, args in jobs:
            try:
                callback(*args)
            except Exception:
                Logger.exception("TickScheduler", f"Job {getattr(callback, '__name__', callback)} failed on tick {self.current_tick}.")
        return len(jobs)
