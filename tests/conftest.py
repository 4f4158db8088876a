import logging

import pytest

from controller import QuickNotesController
from quicknotes.core import Note
from quicknotes.core.store import NoteStore
from quicknotes.events import EventDispatcher, EventType


class EventRecorder:
    def __init__(self, dispatcher: EventDispatcher) -> None:
        self.events = []
        for event_type in EventType:
            dispatcher.add_listener(event_type, self.events.append)

    def types(self) -> list:
        return [event.event_type for event in self.events]


@pytest.fixture
def store() -> NoteStore:
    return NoteStore()


@pytest.fixture
def controller() -> QuickNotesController:
    return QuickNotesController()


@pytest.fixture
def recorder(controller: QuickNotesController) -> EventRecorder:
    return EventRecorder(controller.event_dispatcher)


@pytest.fixture
def controller_with_note(controller: QuickNotesController) -> QuickNotesController:
    controller.store.add(Note("A", "B"))
    return controller


@pytest.fixture
def fresh_logger():
    logger = logging.getLogger("quicknotes")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
