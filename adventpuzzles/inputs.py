"""Reading puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line endings.

    A final newline does not produce an extra empty line, and a carriage
    return before a newline is dropped.
    """
    text = Path(path).read_bytes().decode("utf-8")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_byte_lines(path: str | os.PathLike[str]) -> list[bytes]:
    """Return the raw contents of a file split on every newline byte."""
    return Path(path).read_bytes().split(b"\n")