"""Rubik's cube model: move-notation parsing, face turns and text display."""

__version__ = "0.1.0"