"""
Event System
=============

A simple event system for decoupled communication between the controller
and whichever front end is rendering it.
"""

import logging
from typing import Callable, Dict, List, Any
from enum import Enum, auto

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Available event types."""
    STATUS_UPDATED = auto()
    ERROR_OCCURRED = auto()
    SCREEN_CHANGED = auto()
    NOTE_ADDED = auto()
    NOTE_UPDATED = auto()
    SAVE_REJECTED = auto()


class Event:
    """Base event class."""

    def __init__(self, event_type: EventType, data: Any = None):
        self.event_type = event_type
        self.data = data


class EventDispatcher:
    """Manages event registration and dispatch."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable[[Event], None]]] = {}

    def add_listener(
        self,
        event_type: EventType,
        listener: Callable[[Event], None]
    ) -> None:
        """
        Add a listener for a specific event type.

        Args:
            event_type: Type of event to listen for
            listener: Callback function to be called when event occurs
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(listener)

    def remove_listener(
        self,
        event_type: EventType,
        listener: Callable[[Event], None]
    ) -> None:
        """
        Remove a listener for a specific event type.

        Args:
            event_type: Type of event the listener is registered for
            listener: Callback function to remove
        """
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[event_type]

    def clear(self) -> None:
        """Drop every registered listener."""
        self._listeners.clear()

    def dispatch(self, event: Event) -> None:
        """
        Dispatch an event to all registered listeners.

        A failing listener is logged and does not stop the remaining ones.

        Args:
            event: Event object to dispatch
        """
        for listener in list(self._listeners.get(event.event_type, [])):
            try:
                listener(event)
            except Exception:
                logger.exception("Error in %s listener", event.event_type.name)

    def dispatch_status(self, message: str) -> None:
        """
        Convenience method to dispatch a status update event.

        Args:
            message: Status message to dispatch
        """
        self.dispatch(Event(EventType.STATUS_UPDATED, message))

    def dispatch_error(self, error: str) -> None:
        """
        Convenience method to dispatch an error event.

        Args:
            error: Error message to dispatch
        """
        self.dispatch(Event(EventType.ERROR_OCCURRED, error))

    def dispatch_screen_changed(self, state: Any) -> None:
        """Dispatch the screen state the front end should render next."""
        self.dispatch(Event(EventType.SCREEN_CHANGED, state))

    def dispatch_note_added(self, index: int) -> None:
        self.dispatch(Event(EventType.NOTE_ADDED, index))

    def dispatch_note_updated(self, index: int) -> None:
        self.dispatch(Event(EventType.NOTE_UPDATED, index))

    def dispatch_save_rejected(self) -> None:
        self.dispatch(Event(EventType.SAVE_REJECTED))
