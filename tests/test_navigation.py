import pytest

from quicknotes.core import Note
from quicknotes.core.navigation import (
    AddNote,
    AddNoteRequested,
    BackRequested,
    NavigationController,
    NavigationState,
    NoteSelected,
    ReplaceNote,
    SaveRequested,
    Screen,
    apply,
    is_valid_note,
)
from quicknotes.core.store import NoteIndexError, NoteStore


@pytest.mark.parametrize(
    "title, content, expected",
    [("A", "B", True), ("", "B", False), ("A", "", False), ("", "", False), (" ", " ", True)],
)
def test_is_valid_note_requires_both_fields(title: str, content: str, expected: bool) -> None:
    assert is_valid_note(title, content) is expected


def test_home_add_goes_to_create() -> None:
    transition = apply(NavigationState.home(), AddNoteRequested())
    assert transition.state == NavigationState.create()
    assert transition.effect is None


def test_home_select_goes_to_edit() -> None:
    transition = apply(NavigationState.home(), NoteSelected("abc"))
    assert transition.state == NavigationState.edit("abc")
    assert transition.state.screen is Screen.EDIT


def test_create_valid_save_adds_and_returns_home() -> None:
    transition = apply(NavigationState.create(), SaveRequested("A", "B"))
    assert transition.state == NavigationState.home()
    assert transition.effect == AddNote("A", "B")


def test_edit_valid_save_replaces_and_returns_home() -> None:
    transition = apply(NavigationState.edit("abc"), SaveRequested("A2", "B"))
    assert transition.state == NavigationState.home()
    assert transition.effect == ReplaceNote("abc", "A2", "B")


@pytest.mark.parametrize("state", [NavigationState.create(), NavigationState.edit("abc")])
@pytest.mark.parametrize("title, content", [("", "B"), ("A", ""), ("", "")])
def test_invalid_save_is_a_no_op(state: NavigationState, title: str, content: str) -> None:
    transition = apply(state, SaveRequested(title, content))
    assert transition.state == state
    assert transition.effect is None
    assert not transition.changed


@pytest.mark.parametrize("state", [NavigationState.create(), NavigationState.edit("abc")])
def test_back_returns_home_without_effect(state: NavigationState) -> None:
    transition = apply(state, BackRequested())
    assert transition.state == NavigationState.home()
    assert transition.effect is None


@pytest.mark.parametrize(
    "state, event",
    [
        (NavigationState.home(), SaveRequested("A", "B")),
        (NavigationState.home(), BackRequested()),
        (NavigationState.create(), AddNoteRequested()),
        (NavigationState.create(), NoteSelected("abc")),
        (NavigationState.edit("abc"), AddNoteRequested()),
        (NavigationState.edit("abc"), NoteSelected("xyz")),
    ],
)
def test_events_outside_their_screen_are_ignored(state, event) -> None:
    transition = apply(state, event)
    assert transition.state == state
    assert transition.effect is None


def test_controller_starts_on_home() -> None:
    navigation = NavigationController(NoteStore())
    assert navigation.screen is Screen.HOME
    assert navigation.selected_index is None
    assert navigation.selected_note() is None


def test_controller_create_then_save_adds_note() -> None:
    store = NoteStore()
    navigation = NavigationController(store)
    navigation.request_add()
    navigation.save("A", "B")
    assert navigation.screen is Screen.HOME
    assert [note.as_pair() for note in store.all()] == [("A", "B")]


def test_controller_edit_save_keeps_identifier_and_position() -> None:
    store = NoteStore()
    first, second = Note("A", "B"), Note("C", "D")
    store.add(first)
    store.add(second)
    navigation = NavigationController(store)

    navigation.select(1)
    assert navigation.selected_index == 1
    assert navigation.selected_note() is second

    navigation.save("C2", "D2")
    assert navigation.screen is Screen.HOME
    assert len(store) == 2
    assert store.get(1).as_pair() == ("C2", "D2")
    assert store.get(1).id == second.id
    assert store.get(0) is first


def test_controller_select_invalid_index_raises_and_keeps_state() -> None:
    store = NoteStore()
    store.add(Note("A", "B"))
    navigation = NavigationController(store)
    with pytest.raises(NoteIndexError):
        navigation.select(3)
    assert navigation.state == NavigationState.home()


def test_controller_invalid_edit_save_stays_on_edit() -> None:
    store = NoteStore()
    store.add(Note("A", "B"))
    navigation = NavigationController(store)
    navigation.select(0)
    navigation.save("C", "")
    assert navigation.screen is Screen.EDIT
    assert navigation.selected_index == 0
    assert store.get(0).as_pair() == ("A", "B")


def test_controller_reset_returns_home() -> None:
    navigation = NavigationController(NoteStore())
    navigation.request_add()
    navigation.reset()
    assert navigation.state == NavigationState.home()
