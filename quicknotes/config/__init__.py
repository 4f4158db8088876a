"""
Configuration Management
==========================

This module contains configuration management components for Quick Notes.
It provides a single, consistent settings source for both the terminal and
the Tkinter front ends.
"""

from quicknotes.config.manager import ConfigManager
