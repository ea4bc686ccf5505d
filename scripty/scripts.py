"""Enumerate the scripts under a root and read their descriptions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, TextIO, Tuple

from scripty.errors import DirReadError, ScriptReadError
from scripty.log import get_logger
from scripty.paths import DESCRIPTION_LOOKAHEAD, SUFFIX_WHITELIST

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScriptRecord:
    name: str
    suffix: str
    path: str

    def matches(self, requested: str) -> bool:
        """True for the bare name or the name with its file extension."""
        return requested == self.name or requested == self.name + self.suffix


def split_suffix(filename: str, suffixes: Sequence[str] = SUFFIX_WHITELIST) -> Tuple[str, str]:
    """Strip the first whitelisted suffix the filename ends with, once."""
    for suffix in suffixes:
        if suffix and filename.endswith(suffix):
            return filename[: -len(suffix)], suffix
    return filename, ""


def enumerate_scripts(
    root_dir: Path | str,
    suffixes: Sequence[str] = SUFFIX_WHITELIST,
) -> List[ScriptRecord]:
    """Return one record per regular file under ``root_dir``.

    Entries are visited in name order. A subdirectory's records are spliced
    in where the subdirectory sorts, depth first. Files whose whole name is a
    whitelisted suffix are skipped.
    """
    root = Path(root_dir)
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise DirReadError(
            message=f"can't read dir: {root}",
            details={"path": str(root), "reason": str(exc)},
        ) from exc

    records: List[ScriptRecord] = []
    for entry in entries:
        if entry.is_dir():
            records.extend(enumerate_scripts(entry.path, suffixes))
        elif entry.is_file():
            name, suffix = split_suffix(entry.name, suffixes)
            if not name:
                # A file named just ".sh" has no name to call it by
                logger.debug("skipping unnamed script %s", entry.path)
                continue
            records.append(ScriptRecord(name=name, suffix=suffix, path=os.path.abspath(entry.path)))
        else:
            logger.debug("skipping non-regular entry %s", entry.path)
    return records


def _is_ignored_header_line(line: str) -> bool:
    return not line.strip() or line.startswith("#!")


def _next_line(handle: TextIO) -> str:
    # EOF reads as an empty line
    return handle.readline().rstrip("\r\n")


def describe(script_path: Path | str) -> str:
    """Return the script's first comment line, or "" when it has none.

    Blank lines and the shebang are skipped, at most DESCRIPTION_LOOKAHEAD
    of them. Only spaces and '#' are trimmed from the left and only spaces
    from the right.
    """
    try:
        with open(script_path, encoding="utf-8", errors="replace") as handle:
            line = _next_line(handle)
            for _ in range(DESCRIPTION_LOOKAHEAD):
                if not _is_ignored_header_line(line):
                    break
                line = _next_line(handle)
    except OSError as exc:
        raise ScriptReadError(
            message=f"can't read script {script_path}: {exc}",
            details={"path": str(script_path)},
        ) from exc

    if not line.startswith("#"):
        return ""
    return line.lstrip("# ").rstrip(" ")
