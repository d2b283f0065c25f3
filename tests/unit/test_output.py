from __future__ import annotations

import io

from rich.console import Console

from sidecopy.output import format_metadata, format_presence


def _console(encoding: str) -> Console:
    return Console(file=io.TextIOWrapper(io.BytesIO(), encoding=encoding))


def test_format_presence_uses_glyphs_when_supported():
    console = _console("utf-8")

    assert format_presence(True, console) == "[green]✓[/green]"
    assert format_presence(False, console) == "[red]✗[/red]"


def test_format_presence_falls_back_to_ascii():
    console = _console("ascii")

    assert format_presence(True, console) == "[green]OK[/green]"
    assert format_presence(False, console) == "[red]missing[/red]"


def test_format_metadata_escapes_markup():
    assert format_metadata([]) == "-"
    assert format_metadata(["abc123", 7]) == "abc123, 7"
    assert format_metadata(["[bold]x"]) == "\\[bold]x"
