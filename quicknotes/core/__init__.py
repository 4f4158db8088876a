"""
Core Quick Notes Components
============================

This module contains the core components:
- store: In-memory ordered note collection
- navigation: Screen state machine (Home, Create, Edit)
- formatter: Plain-text rendering of notes for list cards and the terminal
- models: Data models (Note, etc.)
"""

from dataclasses import dataclass, field
import uuid

DEFAULT_PREVIEW_LENGTH = 100


def _new_note_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Note:
    """Represents a single note."""
    title: str
    content: str

    # Assigned at creation, kept across edits
    id: str = field(default_factory=_new_note_id)

    def preview(self, limit: int = DEFAULT_PREVIEW_LENGTH) -> str:
        """Card text for the home list: leading content plus an ellipsis."""
        return self.content[:limit] + "..."

    def copy(self) -> "Note":
        """Return a detached copy carrying the same identifier."""
        return Note(title=self.title, content=self.content, id=self.id)

    def as_pair(self) -> tuple[str, str]:
        return (self.title, self.content)
