#!/usr/bin/env python3
"""
Quick Notes - GUI Entry Point
=============================
Simple Tkinter front end using modular architecture.

Usage:
    python main.py
"""

import tkinter as tk
from controller import QuickNotesController
from view import QuickNotesView
from quicknotes.config.manager import ConfigManager
from quicknotes.logger import configure_logging


def main() -> None:
    """Application entry point - wires layers together."""
    config = ConfigManager.load()
    configure_logging(config["log_level"], config["log_file"])

    # Create the root window
    root = tk.Tk()

    # Create controller (logic layer)
    controller = QuickNotesController()

    # Create view (presentation layer), inject controller
    app = QuickNotesView(root, controller, config)

    # Run the application
    app.run()


if __name__ == "__main__":
    main()
