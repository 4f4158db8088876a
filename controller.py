"""
Controller layer for Quick Notes.
Owns the application state, no Tkinter dependencies.
Uses event system for communication.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple
from quicknotes.core import Note
from quicknotes.core.navigation import NavigationController, Screen
from quicknotes.core.store import NoteIndexError, NoteStore
from quicknotes.events import EventDispatcher

logger = logging.getLogger("quicknotes.controller")


@dataclass(frozen=True)
class ScreenState:
    """What the front end should render: the active screen and the note under edit."""
    screen: Screen
    selected_index: Optional[int] = None
    note: Optional[Note] = None


@dataclass
class SaveResult:
    """Result of a save request."""
    success: bool
    message: str
    index: Optional[int] = None
    error: Optional[str] = None


class QuickNotesController:
    """
    Application state for Quick Notes: one note store and one navigation
    state machine, created together and torn down by :meth:`shutdown`.
    Front ends call the ``on_*`` methods and re-render from
    :meth:`current_screen_state` and :meth:`notes_snapshot`.
    """

    def __init__(
        self,
        event_dispatcher: EventDispatcher = None,
        store: NoteStore = None
    ):
        self.event_dispatcher = event_dispatcher or EventDispatcher()
        self.store = store if store is not None else NoteStore()
        self.navigation = NavigationController(self.store)

    def current_screen_state(self) -> ScreenState:
        """Active screen, plus a copy of the selected note on the edit screen."""
        index = self.navigation.selected_index
        if index is None:
            return ScreenState(self.navigation.screen)
        return ScreenState(
            self.navigation.screen,
            selected_index=index,
            note=self.navigation.selected_note().copy()
        )

    def notes_snapshot(self) -> Tuple[Tuple[str, str], ...]:
        """Ordered (title, content) pairs for every note."""
        return tuple(note.as_pair() for note in self.store.all())

    def notes(self) -> Tuple[Note, ...]:
        """Detached copies of every note, for rendering."""
        return tuple(note.copy() for note in self.store.all())

    def on_add_note_requested(self) -> None:
        """Handle the "new note" action on the home screen."""
        self._apply(self.navigation.request_add)

    def on_note_selected(self, index: int) -> None:
        """
        Open the note at ``index`` on the edit screen.

        Raises:
            NoteIndexError: If index is outside the store
        """
        if self.navigation.screen is not Screen.HOME:
            return
        try:
            self._apply(lambda: self.navigation.select(index))
        except NoteIndexError as e:
            logger.warning("Cannot select note: %s", e)
            self.event_dispatcher.dispatch_error(str(e))
            raise

    def on_save_requested(self, title: str, content: str) -> SaveResult:
        """
        Save the form contents: creates a note on the create screen and
        replaces the selected note on the edit screen.

        Args:
            title: Title field contents
            content: Content field contents

        Returns:
            SaveResult; a rejected save leaves all state untouched
        """
        screen = self.navigation.screen
        if screen is Screen.HOME:
            return SaveResult(
                success=False,
                message="Nothing to save",
                error="No note form is open"
            )

        index = self.navigation.selected_index
        transition = self._apply(lambda: self.navigation.save(title, content))

        if not transition.changed:
            logger.debug("Save rejected on %s screen: empty title or content", screen.value)
            self.event_dispatcher.dispatch_save_rejected()
            return SaveResult(
                success=False,
                message="Title and content are both required",
                error="Empty input"
            )

        if screen is Screen.CREATE:
            index = len(self.store) - 1
            logger.info("Created note %d", index)
            self.event_dispatcher.dispatch_note_added(index)
            self.event_dispatcher.dispatch_status("Note saved")
            return SaveResult(success=True, message="Note saved", index=index)

        logger.info("Updated note %d", index)
        self.event_dispatcher.dispatch_note_updated(index)
        self.event_dispatcher.dispatch_status("Changes saved")
        return SaveResult(success=True, message="Changes saved", index=index)

    def on_back_requested(self) -> None:
        """Leave the create or edit screen without saving."""
        self._apply(self.navigation.back)

    def shutdown(self) -> None:
        """Discard all notes and return to the home screen."""
        logger.info("Shutting down; discarding %d notes", len(self.store))
        self.store.clear()
        self.navigation.reset()
        self.event_dispatcher.clear()

    def _apply(self, action):
        """Run a navigation action and announce the new screen if it changed."""
        before = self.navigation.state
        transition = action()
        if self.navigation.state != before:
            self.event_dispatcher.dispatch_screen_changed(self.current_screen_state())
        return transition
