"""
Note Store
===========

Ordered, in-memory collection of notes addressed by position.
"""

import logging
from typing import Iterator, List, Tuple
from quicknotes.core import Note

logger = logging.getLogger(__name__)


class NoteIndexError(IndexError):
    """Raised when a note is addressed at a position (or id) the store does not hold."""


class NoteStore:
    """Owns the sequence of notes. Single-threaded mutation only."""

    def __init__(self):
        self._notes: List[Note] = []

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.all())

    def _check_index(self, index: int) -> None:
        # Python indexing would accept negatives and bools; positions here are ints in 0..len-1
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._notes):
            raise NoteIndexError(
                f"Note index {index!r} out of range (store holds {len(self._notes)} notes)"
            )

    def add(self, note: Note) -> None:
        """Append a note to the end of the sequence."""
        self._notes.append(note)
        logger.debug("Added note %s at position %d", note.id, len(self._notes) - 1)

    def replace_at(self, index: int, note: Note) -> None:
        """
        Replace the note at ``index`` in place.

        Args:
            index: Position of the note to replace
            note: Replacement note

        Raises:
            NoteIndexError: If index is outside [0, len)
        """
        self._check_index(index)
        self._notes[index] = note
        logger.debug("Replaced note at position %d with %s", index, note.id)

    def get(self, index: int) -> Note:
        """Return the note at ``index``, raising NoteIndexError when invalid."""
        self._check_index(index)
        return self._notes[index]

    def all(self) -> Tuple[Note, ...]:
        """Read-only view of the notes in insertion order."""
        return tuple(self._notes)

    def index_of(self, note_id: str) -> int:
        """
        Resolve a note identifier to its current position.

        Raises:
            NoteIndexError: If no note carries that identifier
        """
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        raise NoteIndexError(f"No note with id {note_id!r}")

    def clear(self) -> None:
        """Drop every note. Used on application teardown."""
        self._notes.clear()
