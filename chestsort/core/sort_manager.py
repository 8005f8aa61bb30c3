# chestsort/core/sort_manager.py
from typing import Any, Dict, List, Optional

from chestsort.commands.command_system import CommandProcessor
from chestsort.config import (
    EVENT_SORT_FEEDBACK, FORMAT_ERROR, FORMAT_GRAY, FORMAT_RESET, FORMAT_SUCCESS
)
from chestsort.core.container_adapter import ContainerAdapter
from chestsort.core.event_system import EventSystem
from chestsort.core.scheduler import TickScheduler
from chestsort.core.settings import SortSettings
from chestsort.core.sorter import STATUS_ABORTED, ReconcileResult, reconcile
from chestsort.player import Player
from chestsort.utils.logger import Logger

class SortManager:
    """
    Glue between the host and the sorting engine: decides when a chest gets
    sorted, holds the current settings, and turns results into chat feedback.
    """

    def __init__(self, settings: Optional[SortSettings] = None,
                 events: Optional[EventSystem] = None,
                 scheduler: Optional[TickScheduler] = None):
        self.settings = settings or SortSettings()
        self.events = events or EventSystem()
        self.scheduler = scheduler or TickScheduler()
        self.command_processor = CommandProcessor()
        self.players: List[Player] = []
        self.active_container: Optional[ContainerAdapter] = None
        self.running = True

    # --- Settings ---
    def update_settings(self, settings: SortSettings) -> None:
        Logger.info("SortManager", f"Settings changed: {settings}")
        self.settings = settings

    # --- Players & chat ---
    def join(self, player: Player) -> None:
        if player not in self.players:
            self.players.append(player)

    def broadcast(self, message: str) -> None:
        for player in self.players:
            player.send_message(message)

    def notify(self, player: Player, message: str, color: str = FORMAT_GRAY) -> None:
        """Sends sort feedback to one player, only while verbose is on."""
        if self.settings.verbose:
            player.send_message(f"{color}{message}{FORMAT_RESET}")

    # --- Interaction trigger ---
    def on_interact(self, player: Player, container: Optional[ContainerAdapter]) -> bool:
        """
        Called when a player uses a chest. Sneaking (or the sort-anywhere toggle)
        queues a sort for the next tick. Returns True when a sort was queued.
        """
        if not self.settings.allow_sort_without_sneak and not player.is_sneaking:
            return False
        self.scheduler.run(self.sort_container, player, container, self.settings)
        return True

    def tick(self) -> int:
        return self.scheduler.tick()

    def sort_container(self, player: Player, container: Optional[ContainerAdapter],
                       settings: Optional[SortSettings] = None) -> Optional[ReconcileResult]:
        """Sorts `container` now. `settings` defaults to the current settings."""
        settings = settings or self.settings
        if container is None:
            self.notify(player, "No inventory component!", FORMAT_ERROR)
            return None

        result = reconcile(container, settings, self.events)

        if result.success:
            self.notify(player, f"Chest sorted! [mode: {settings.sorting_mode}]", FORMAT_SUCCESS)
        elif result.status == STATUS_ABORTED and result.diagnostic and not result.diagnostic.deltas:
            self.notify(player, result.diagnostic.describe(), FORMAT_ERROR)
        else:
            detail = result.diagnostic.describe() if result.diagnostic else "unknown error"
            self.notify(player, f"Sorting failed - {detail}", FORMAT_ERROR)

        self.events.publish(EVENT_SORT_FEEDBACK, {"player": player, "container": container, "result": result})
        return result

    # --- Commands ---
    def process_command(self, player: Player, text: str) -> str:
        context: Dict[str, Any] = {"manager": self, "player": player, "container": self.active_container}
        return self.command_processor.process_input(text, context)
