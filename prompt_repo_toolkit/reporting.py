"""Text and JSON rendering of validation errors."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable

from rich.console import Console
from rich.text import Text

from prompt_repo_toolkit.models import Severity, ToolkitError
from prompt_repo_toolkit.severity import summarize

logger = logging.getLogger(__name__)

_STYLES: dict[Severity, str] = {
    Severity.FATAL: "bold magenta",
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
}


def render_errors(errors: Iterable[ToolkitError], console: Console) -> None:
    """Print *errors* grouped by file, with a per-level count header.

    Parameters
    ----------
    errors : Iterable[ToolkitError]
        Errors in discovery order.
    console : Console
        Destination console; colour follows its settings.
    """
    errors = list(errors)
    if not errors:
        console.print(Text("No validation errors found.", style="green"))
        return

    summary = summarize(errors).to_dict()
    header = Text(f"Found {len(errors)} validation issue(s): ")
    counts = [(f"{count} {level}(s)", _STYLES[Severity(level)]) for level, count in summary.items() if count]
    for index, (label, style) in enumerate(counts):
        if index:
            header.append(", ")
        header.append(label, style=style)
    console.print(header)
    console.print()

    by_file: dict[str, list[ToolkitError]] = {}
    for error in errors:
        by_file.setdefault(str(error.file) if error.file else "unknown", []).append(error)

    for file, file_errors in by_file.items():
        console.print(Text(f"File: {file}", style="bold"))
        for error in file_errors:
            line = f"  [{error.severity.value.upper()}] {error.code}: {error.message}"
            console.print(Text(line, style=_STYLES[error.severity]))
            for detail in _detail_lines(error):
                console.print(Text(f"    {detail}"))
        console.print()


def format_errors(errors: Iterable[ToolkitError], *, color: bool = False, width: int = 120) -> str:
    """Return the text rendering of *errors* as a string."""
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=color, no_color=not color, highlight=False, width=width)
    render_errors(errors, console)
    return buffer.getvalue()


def errors_to_json(errors: Iterable[ToolkitError]) -> list[dict[str, Any]]:
    """Map errors onto the JSON error shape."""
    return [error.to_dict() for error in errors]


def write_json(payload: dict[str, Any], output: Path | None = None) -> str:
    """Serialise *payload*, writing it to *output* when given.

    Returns
    -------
    str
        The JSON text.
    """
    text = json.dumps(payload, indent=2, default=str)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        logger.debug("Wrote report to %s", output)
    return text


def _detail_lines(error: ToolkitError) -> list[str]:
    lines: list[str] = []
    for key, value in (error.meta or {}).items():
        if key == "chain" and isinstance(value, (list, tuple)):
            lines.append(f"Chain: {' -> '.join(value)}")
        elif key == "partial":
            lines.append(f"Partial: {value}")
        elif key == "path" and isinstance(value, (list, tuple)):
            lines.append(f"Path: {'.'.join(str(part) for part in value)}")
        elif isinstance(value, (str, int, float)) and key != "type":
            lines.append(f"{key}: {value}")
    if error.hint:
        lines.append(f"Hint: {error.hint}")
    return lines
