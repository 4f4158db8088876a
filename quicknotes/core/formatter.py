"""
Note Formatter
===============

Responsible for formatting Note objects as plain text for list cards and
the terminal front end.
"""

from typing import Sequence
from quicknotes.core import Note, DEFAULT_PREVIEW_LENGTH


class NoteFormatter:
    """Formats notes as plain text."""

    EMPTY_LIST_MESSAGE = "(No notes yet - use 'new' to create one)"

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH):
        self.preview_length = preview_length

    def format_list(self, notes: Sequence[Note]) -> str:
        """Numbered listing of notes, one card per entry."""
        if not notes:
            return self.EMPTY_LIST_MESSAGE

        lines = []
        for i, note in enumerate(notes):
            lines.append(f"[{i}] {note.title}")
            lines.append(f"    {self._single_line(note.preview(self.preview_length))}")
        return "\n".join(lines)

    @staticmethod
    def format_detail(note: Note) -> str:
        """Full title and content of a single note."""
        lines = [
            f"Title: {note.title}",
            "Content:",
            note.content,
        ]
        return "\n".join(lines)

    @staticmethod
    def _single_line(text: str) -> str:
        """Collapse newlines so a preview fits on one terminal line."""
        return " ".join(text.split())
