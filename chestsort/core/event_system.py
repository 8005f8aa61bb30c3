"""
chestsort/core/event_system.py
Event system for the sorting engine.
Lets hosts observe sort outcomes without the engine knowing who is listening.
"""
from typing import Any, Callable, Dict, List, Optional, Set

from chestsort.utils.logger import Logger


class EventSystem:
    """
    Publish/subscribe hub used as the engine's diagnostics sink.

    A failing subscriber is logged and skipped; it never affects the
    publisher or the other subscribers.
    """

    def __init__(self):
        """Initialize the event system."""
        self.subscribers: Dict[str, List[Callable[[str, Any], None]]] = {}
        self.event_history: Dict[str, Any] = {}  # Last value for each event type

    def subscribe(self, event_type: str, callback: Callable[[str, Any], None]) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to.
            callback: Called as callback(event_type, data).
        """
        callbacks = self.subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: str, callback: Callable[[str, Any], None]) -> None:
        if event_type in self.subscribers and callback in self.subscribers[event_type]:
            self.subscribers[event_type].remove(callback)
            if not self.subscribers[event_type]:
                self.subscribers.pop(event_type)

    def publish(self, event_type: str, data: Any = None) -> None:
        """
        Publish an event.

        Args:
            event_type: The type of event to publish.
            data: The event data.
        """
        self.event_history[event_type] = data
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event_type, data)
            except Exception as e:
                Logger.error("EventSystem", f"Error in event callback for {event_type}: {e}")

    def get_last_event_data(self, event_type: str, default: Any = None) -> Any:
        return self.event_history.get(event_type, default)

    def clear_history(self, event_types: Optional[Set[str]] = None) -> None:
        """
        Clear event history.

        Args:
            event_types: Set of event types to clear. If None, clear all.
        """
        if event_types is None:
            self.event_history.clear()
        else:
            for event_type in event_types:
                self.event_history.pop(event_type, None)
