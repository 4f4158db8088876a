"""
View layer for Quick Notes.
Tkinter widgets and layout, delegates all logic to controller.
Uses event system for communication.
"""

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence
from controller import QuickNotesController, ScreenState
from quicknotes.core import Note, DEFAULT_PREVIEW_LENGTH
from quicknotes.core.navigation import Screen
from quicknotes.events import EventType, Event


class LabeledEntry(ttk.Frame):
    """Single-purpose widget: label + entry pair."""

    def __init__(
        self,
        parent: tk.Widget,
        label_text: str,
        width: int = 40,
        **kwargs
    ):
        super().__init__(parent, **kwargs)

        self.label = ttk.Label(self, text=label_text, width=8, anchor="w")
        self.label.pack(side=tk.LEFT)

        self.entry = ttk.Entry(self, width=width)
        self.entry.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(5, 0))

    def get_value(self) -> str:
        """Get current entry value."""
        return self.entry.get()

    def set_value(self, value: str) -> None:
        """Set entry value."""
        self.entry.delete(0, tk.END)
        self.entry.insert(0, value)

    def focus(self) -> None:
        self.entry.focus_set()


class NoteCard(ttk.Frame):
    """One note on the home list: title and content preview, clickable."""

    def __init__(
        self,
        parent: tk.Widget,
        note: Note,
        on_click: Callable[[], None],
        preview_length: int = DEFAULT_PREVIEW_LENGTH,
        **kwargs
    ):
        super().__init__(parent, padding="8", relief=tk.RAISED, borderwidth=1, **kwargs)

        self.title_label = ttk.Label(self, text=note.title, font=("TkDefaultFont", 12, "bold"))
        self.title_label.pack(fill=tk.X, anchor="w")

        self.preview_label = ttk.Label(
            self,
            text=note.preview(preview_length),
            wraplength=400,
            justify=tk.LEFT
        )
        self.preview_label.pack(fill=tk.X, anchor="w", pady=(4, 0))

        for widget in (self, self.title_label, self.preview_label):
            widget.bind("<Button-1>", lambda _event: on_click())


class HomeScreen(ttk.Frame):
    """Scrollable list of note cards with a button for adding a note."""

    def __init__(
        self,
        parent: tk.Widget,
        on_add: Callable[[], None],
        on_select: Callable[[int], None],
        preview_length: int = DEFAULT_PREVIEW_LENGTH,
        **kwargs
    ):
        super().__init__(parent, padding="10", **kwargs)
        self.on_select = on_select
        self.preview_length = preview_length

        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        # Canvas hosts a frame so the card list can scroll
        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.canvas.grid(row=0, column=0, sticky="nsew")

        scrollbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        self.canvas.configure(yscrollcommand=scrollbar.set)

        self.list_frame = ttk.Frame(self.canvas)
        self._window = self.canvas.create_window((0, 0), window=self.list_frame, anchor="nw")
        self.list_frame.bind(
            "<Configure>",
            lambda _event: self.canvas.configure(scrollregion=self.canvas.bbox("all"))
        )
        self.canvas.bind(
            "<Configure>",
            lambda event: self.canvas.itemconfigure(self._window, width=event.width)
        )

        self.add_btn = ttk.Button(self, text="+", width=4, command=on_add)
        self.add_btn.grid(row=1, column=0, columnspan=2, sticky="e", pady=(10, 0))

    def show_notes(self, notes: Sequence[Note]) -> None:
        """Rebuild the card list from the given notes."""
        for child in self.list_frame.winfo_children():
            child.destroy()

        if not notes:
            ttk.Label(self.list_frame, text="No notes yet. Press + to add one.").pack(pady=20)
            return

        for index, note in enumerate(notes):
            card = NoteCard(
                self.list_frame,
                note,
                on_click=lambda i=index: self.on_select(i),
                preview_length=self.preview_length
            )
            card.pack(fill=tk.X, pady=4)


class NoteForm(ttk.Frame):
    """Title and content form shared by the create and edit screens."""

    def __init__(
        self,
        parent: tk.Widget,
        on_save: Callable[[str, str], None],
        on_back: Callable[[], None],
        **kwargs
    ):
        super().__init__(parent, padding="10", **kwargs)

        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)  # Content area expands

        self.title_entry = LabeledEntry(self, "Title:")
        self.title_entry.grid(row=0, column=0, sticky="ew", pady=(0, 10))

        ttk.Label(self, text="Content:").grid(row=1, column=0, sticky="w")

        self.content_text = tk.Text(self, wrap=tk.WORD, height=15)
        self.content_text.grid(row=2, column=0, sticky="nsew", pady=(0, 10))

        button_frame = ttk.Frame(self)
        button_frame.grid(row=3, column=0, sticky="ew")

        self.back_btn = ttk.Button(button_frame, text="Back", command=on_back)
        self.back_btn.pack(side=tk.LEFT)

        self.save_btn = ttk.Button(
            button_frame,
            text="Save",
            command=lambda: on_save(self.get_title(), self.get_content())
        )
        self.save_btn.pack(side=tk.RIGHT)

    def load(self, note: Optional[Note], button_text: str) -> None:
        """Fill the form (blank for a new note) and label the save button."""
        self.title_entry.set_value(note.title if note else "")
        self.content_text.delete("1.0", tk.END)
        if note:
            self.content_text.insert("1.0", note.content)
        self.save_btn.configure(text=button_text)
        self.title_entry.focus()

    def get_title(self) -> str:
        return self.title_entry.get_value()

    def get_content(self) -> str:
        # Text widgets always end with a trailing newline
        return self.content_text.get("1.0", "end-1c")


class QuickNotesView:
    """
    Main application window for Quick Notes.
    Thin wrapper around Tkinter, delegates all logic to controller.
    Uses event system for communication.
    """

    def __init__(self, root: tk.Tk, controller: QuickNotesController, config: dict):
        self.root = root
        self.controller = controller

        self.root.title(config["window_title"])
        self.root.geometry(f"{config['window_width']}x{config['window_height']}")
        self.root.minsize(320, 400)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        # Set up event listeners
        self._setup_event_listeners()

        self._create_widgets(config["preview_length"])
        self._render(self.controller.current_screen_state())

    def _setup_event_listeners(self) -> None:
        """Set up event listeners for controller events."""
        self.controller.event_dispatcher.add_listener(
            EventType.SCREEN_CHANGED,
            self._on_screen_changed
        )
        self.controller.event_dispatcher.add_listener(
            EventType.STATUS_UPDATED,
            self._on_status_updated
        )
        self.controller.event_dispatcher.add_listener(
            EventType.ERROR_OCCURRED,
            self._on_error_occurred
        )

    def _create_widgets(self, preview_length: int) -> None:
        """Create all screens; only one is gridded at a time."""
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)

        self.home_screen = HomeScreen(
            self.root,
            on_add=self.controller.on_add_note_requested,
            on_select=self.controller.on_note_selected,
            preview_length=preview_length
        )
        self.note_form = NoteForm(
            self.root,
            on_save=self.controller.on_save_requested,
            on_back=self.controller.on_back_requested
        )

        # === Status Section ===
        self.status_label = ttk.Label(
            self.root,
            text="Ready",
            relief=tk.SUNKEN,
            anchor="w"
        )
        self.status_label.grid(row=1, column=0, sticky="ew")

    def _render(self, state: ScreenState) -> None:
        """Show the screen matching the controller state."""
        self.home_screen.grid_remove()
        self.note_form.grid_remove()

        if state.screen is Screen.HOME:
            self.home_screen.show_notes(self.controller.notes())
            self.home_screen.grid(row=0, column=0, sticky="nsew")
        elif state.screen is Screen.CREATE:
            self.note_form.load(None, "Save")
            self.note_form.grid(row=0, column=0, sticky="nsew")
        else:
            self.note_form.load(state.note, "Save Changes")
            self.note_form.grid(row=0, column=0, sticky="nsew")

    def _update_status(self, message: str) -> None:
        """Update status bar message."""
        self.status_label.configure(text=message)
        self.root.update_idletasks()

    def _on_screen_changed(self, event: Event) -> None:
        """Handle screen change events."""
        self._render(event.data)

    def _on_status_updated(self, event: Event) -> None:
        """Handle status update events."""
        self._update_status(event.data)

    def _on_error_occurred(self, event: Event) -> None:
        """Handle error events."""
        self._update_status(f"Error: {event.data}")

    def _on_close(self) -> None:
        self.controller.shutdown()
        self.root.destroy()

    def run(self) -> None:
        """Start the main event loop."""
        self.root.mainloop()
