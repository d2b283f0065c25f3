"""Rendering helpers for index entries shown in the terminal."""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

_PRESENT_MARKS = {True: ("✓", "OK"), False: ("✗", "missing")}


def format_presence(present: bool, console: Console) -> str:
    """Mark whether an indexed copy still exists, falling back to ASCII."""
    glyph, plain = _PRESENT_MARKS[present]
    try:
        glyph.encode(console.encoding or "ascii")
    except UnicodeEncodeError:
        glyph = plain
    style = "green" if present else "red"
    return f"[{style}]{glyph}[/{style}]"


def format_metadata(values: Sequence[Any]) -> str:
    """Render a metadata sequence as escaped, comma separated text."""
    if not values:
        return "-"
    return escape(", ".join(str(value) for value in values))
