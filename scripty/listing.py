"""Render the script listing for -l and -d."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from scripty.scripts import ScriptRecord, describe

NAME_COLUMN_WIDTH = 25


def render_names(records: Sequence[ScriptRecord]) -> List[str]:
    return [record.name for record in records]


def render_details(
    records: Sequence[ScriptRecord],
    describe: Callable[[str], str] = describe,
) -> Tuple[List[str], Optional[str]]:
    """Return listing lines and the last name cut to fit the name column."""
    lines: List[str] = []
    truncated: Optional[str] = None
    for record in records:
        column = record.name[:NAME_COLUMN_WIDTH].ljust(NAME_COLUMN_WIDTH)
        lines.append(f"{column} {describe(record.path)}")
        if len(record.name) > NAME_COLUMN_WIDTH:
            truncated = record.name
    return lines, truncated


def truncation_warning(name: str) -> str:
    return f"'{name}' truncated for readability! Use 'scripty -l' instead."
