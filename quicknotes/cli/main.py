#!/usr/bin/env python3
"""
Quick Notes - Terminal Entry Point
==================================
Interactive text front end driving the same controller as the Tkinter window.

Usage:
    python -m quicknotes.cli.main
    python -m quicknotes.cli.main --verbose
    printf 'new\\ntitle A\\ncontent B\\nsave\\nlist\\n' | python -m quicknotes.cli.main
"""

import argparse
import sys
from typing import Iterable, Optional, TextIO
from controller import QuickNotesController
from quicknotes import __version__
from quicknotes.config.manager import ConfigManager
from quicknotes.core.formatter import NoteFormatter
from quicknotes.core.navigation import Screen
from quicknotes.core.store import NoteIndexError
from quicknotes.logger import configure_logging

HELP_TEXT = """\
Commands:
  list            Show all notes (home screen)
  new             Start a new note
  open N          Edit note number N
  title TEXT      Set the title field
  content TEXT    Set the content field (use \\n for line breaks)
  show            Show the form being edited
  save            Save the form
  back            Return to the list without saving
  help            Show this help
  quit            Exit (notes are not kept)"""


class NotesShell:
    """Line-oriented session: keeps the open form's fields and forwards actions to the controller."""

    def __init__(
        self,
        controller: QuickNotesController,
        formatter: NoteFormatter = None,
        out: TextIO = None,
        err: TextIO = None
    ):
        self.controller = controller
        self.formatter = formatter or NoteFormatter()
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.title = ""
        self.content = ""

    def prompt(self) -> str:
        state = self.controller.current_screen_state()
        if state.screen is Screen.EDIT:
            return f"edit[{state.selected_index}]> "
        return f"{state.screen.value}> "

    def run(self, lines: Iterable[str]) -> None:
        """Handle each line until ``quit`` or the input runs out."""
        for line in lines:
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """
        Handle one command line.

        Returns:
            False when the session should end, True otherwise
        """
        # Everything after the first space is the argument, kept verbatim
        command, _, argument = line.rstrip("\r\n").lstrip().partition(" ")
        command = command.lower()

        if not command:
            return True
        if command in ("quit", "exit"):
            return False

        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            self._error(f"Unknown command: {command} (try 'help')")
            return True

        handler(argument)
        return True

    def _print(self, text: str) -> None:
        print(text, file=self.out)

    def _error(self, message: str) -> None:
        print(f"Error: {message}", file=self.err)

    def _on_form(self) -> bool:
        if self.controller.current_screen_state().screen is Screen.HOME:
            self._error("No note is open; use 'new' or 'open N' first")
            return False
        return True

    def _cmd_help(self, _argument: str) -> None:
        self._print(HELP_TEXT)

    def _cmd_list(self, _argument: str) -> None:
        if self.controller.current_screen_state().screen is not Screen.HOME:
            self._error("Save or go 'back' before listing notes")
            return
        self._print(self.formatter.format_list(self.controller.notes()))

    def _cmd_new(self, _argument: str) -> None:
        if self.controller.current_screen_state().screen is not Screen.HOME:
            self._error("Save or go 'back' before starting a new note")
            return
        self.controller.on_add_note_requested()
        self.title, self.content = "", ""
        self._print("New note. Set 'title' and 'content', then 'save'.")

    def _cmd_open(self, argument: str) -> None:
        if self.controller.current_screen_state().screen is not Screen.HOME:
            self._error("Save or go 'back' before opening another note")
            return
        try:
            index = int(argument)
        except ValueError:
            self._error(f"Expected a note number, got {argument!r}")
            return

        try:
            self.controller.on_note_selected(index)
        except NoteIndexError:
            self._error(f"No note number {index}")
            return

        note = self.controller.current_screen_state().note
        self.title, self.content = note.title, note.content
        self._print(self.formatter.format_detail(note))

    def _cmd_title(self, argument: str) -> None:
        if self._on_form():
            self.title = argument

    def _cmd_content(self, argument: str) -> None:
        if self._on_form():
            self.content = argument.replace("\\n", "\n")

    def _cmd_show(self, _argument: str) -> None:
        if self._on_form():
            self._print(f"Title: {self.title}\nContent:\n{self.content}")

    def _cmd_save(self, _argument: str) -> None:
        if not self._on_form():
            return
        # Empty fields are rejected without a message, like the save button
        result = self.controller.on_save_requested(self.title, self.content)
        if result.success:
            self._print(result.message)
            self._print(self.formatter.format_list(self.controller.notes()))

    def _cmd_back(self, _argument: str) -> None:
        if self._on_form():
            self.controller.on_back_requested()
            self._print(self.formatter.format_list(self.controller.notes()))


def _interactive_lines(shell: NotesShell) -> Iterable[str]:
    """Yield lines typed at the prompt until EOF or Ctrl-C."""
    while True:
        try:
            yield input(shell.prompt())
        except (EOFError, KeyboardInterrupt):
            print("", file=sys.stderr)
            return


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Take quick notes in the terminal. Notes live only as long as the session.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_TEXT
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at the configured level instead of warnings only"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    config = ConfigManager.load()
    configure_logging(
        config["log_level"] if args.verbose else "WARNING",
        config["log_file"]
    )

    controller = QuickNotesController()
    shell = NotesShell(controller, NoteFormatter(config["preview_length"]))

    is_interactive = sys.stdin.isatty() and sys.stdout.isatty()
    if is_interactive:
        print("Quick Notes - type 'help' for commands.")
        shell.run(_interactive_lines(shell))
    else:
        shell.run(sys.stdin)

    controller.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
