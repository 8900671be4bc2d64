"""Puzzle solutions for several yearly calendars, with shared helpers."""

__version__ = "1.0.0"