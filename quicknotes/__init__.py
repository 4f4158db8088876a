"""
Quick Notes
===========

A small single-device note-taking application with three screens: a home
list, a create-note form and an edit-note form. Notes live in memory only.

This package follows a clean architecture with:
- core/ - Note model, in-memory store, navigation state machine, formatting
- config/ - Settings management
- cli/ - Interactive terminal front end

The Tkinter window lives in the top-level ``view`` module and is launched by
``main.py``.
"""

__version__ = "1.0.0"
__author__ = "Your Name"
