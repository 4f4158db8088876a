"""
Command-Line Interface
=======================

This module contains the interactive terminal front end for Quick Notes.
It drives the same controller as the Tkinter window, one command per line.
"""

from quicknotes.cli.main import main
