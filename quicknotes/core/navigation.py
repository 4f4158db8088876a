"""
Navigation State Machine
=========================

Decides which screen is active and which note (if any) is being edited.

Transitions are computed by the pure function :func:`apply`, which returns
the next state together with the store mutation to perform, if any.
:class:`NavigationController` holds the current state and carries out those
mutations against a :class:`NoteStore`.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from quicknotes.core import Note
from quicknotes.core.store import NoteStore

logger = logging.getLogger(__name__)


class Screen(Enum):
    """Screens the application can show."""
    HOME = "home"
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class NavigationState:
    """Active screen plus the identifier of the note under edit."""
    screen: Screen
    selected_id: Optional[str] = None

    @classmethod
    def home(cls) -> "NavigationState":
        return cls(Screen.HOME)

    @classmethod
    def create(cls) -> "NavigationState":
        return cls(Screen.CREATE)

    @classmethod
    def edit(cls, note_id: str) -> "NavigationState":
        return cls(Screen.EDIT, note_id)


# Triggers coming from the presentation layer

@dataclass(frozen=True)
class AddNoteRequested:
    pass


@dataclass(frozen=True)
class NoteSelected:
    note_id: str


@dataclass(frozen=True)
class SaveRequested:
    title: str
    content: str


@dataclass(frozen=True)
class BackRequested:
    pass


NavigationEvent = Union[AddNoteRequested, NoteSelected, SaveRequested, BackRequested]


# Store mutations requested by a transition

@dataclass(frozen=True)
class AddNote:
    title: str
    content: str


@dataclass(frozen=True)
class ReplaceNote:
    note_id: str
    title: str
    content: str


Effect = Union[AddNote, ReplaceNote]


@dataclass(frozen=True)
class Transition:
    """Result of applying an event: the next state and an optional effect."""
    state: NavigationState
    effect: Optional[Effect] = None

    @property
    def changed(self) -> bool:
        return self.effect is not None


def is_valid_note(title: str, content: str) -> bool:
    """Both fields must be non-empty. This is the only input validation."""
    return bool(title) and bool(content)


def apply(state: NavigationState, event: NavigationEvent) -> Transition:
    """
    Compute the transition for ``event`` in ``state``.

    Events that do not apply to the current screen, and saves with an empty
    title or content, leave the state as it is with no effect.

    Args:
        state: Current navigation state
        event: Trigger from the presentation layer

    Returns:
        Transition carrying the next state and the store effect, if any
    """
    if state.screen is Screen.HOME:
        if isinstance(event, AddNoteRequested):
            return Transition(NavigationState.create())
        if isinstance(event, NoteSelected):
            return Transition(NavigationState.edit(event.note_id))
        return Transition(state)

    if isinstance(event, BackRequested):
        return Transition(NavigationState.home())

    if isinstance(event, SaveRequested):
        if not is_valid_note(event.title, event.content):
            return Transition(state)
        if state.screen is Screen.CREATE:
            effect = AddNote(event.title, event.content)
        else:
            effect = ReplaceNote(state.selected_id, event.title, event.content)
        return Transition(NavigationState.home(), effect)

    return Transition(state)


class NavigationController:
    """
    Holds the current navigation state and applies transitions to it.
    The store is mutated only through the effects returned by :func:`apply`.
    """

    def __init__(self, store: NoteStore):
        self.store = store
        self.state = NavigationState.home()

    @property
    def screen(self) -> Screen:
        return self.state.screen

    @property
    def selected_index(self) -> Optional[int]:
        """Current position of the note under edit, or None off the edit screen."""
        if self.state.screen is not Screen.EDIT:
            return None
        return self.store.index_of(self.state.selected_id)

    def selected_note(self) -> Optional[Note]:
        index = self.selected_index
        return None if index is None else self.store.get(index)

    def request_add(self) -> Transition:
        return self.dispatch(AddNoteRequested())

    def select(self, index: int) -> Transition:
        """
        Open the note at ``index`` for editing.

        Raises:
            NoteIndexError: If index is outside the store
        """
        note = self.store.get(index)
        return self.dispatch(NoteSelected(note.id))

    def save(self, title: str, content: str) -> Transition:
        return self.dispatch(SaveRequested(title, content))

    def back(self) -> Transition:
        return self.dispatch(BackRequested())

    def dispatch(self, event: NavigationEvent) -> Transition:
        """Apply ``event``, perform its effect on the store, and move to the next state."""
        transition = apply(self.state, event)

        if isinstance(transition.effect, AddNote):
            self.store.add(Note(transition.effect.title, transition.effect.content))
        elif isinstance(transition.effect, ReplaceNote):
            index = self.store.index_of(transition.effect.note_id)
            self.store.replace_at(
                index,
                Note(
                    title=transition.effect.title,
                    content=transition.effect.content,
                    id=transition.effect.note_id
                )
            )

        if transition.state != self.state:
            logger.debug(
                "Navigation %s -> %s",
                self.state.screen.value,
                transition.state.screen.value
            )
        self.state = transition.state
        return transition

    def reset(self) -> None:
        self.state = NavigationState.home()
