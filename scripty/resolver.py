"""Match a requested name to a script record and run it."""

from __future__ import annotations

import subprocess
from typing import Dict, List, Sequence

from scripty.errors import DuplicateScriptError, ExecutionError, ScriptNotFoundError
from scripty.log import get_logger
from scripty.scripts import ScriptRecord

logger = get_logger(__name__)


def find_duplicates(records: Sequence[ScriptRecord]) -> Dict[str, List[str]]:
    """Names shared by more than one record, with paths in traversal order."""
    by_name: Dict[str, List[str]] = {}
    for record in records:
        by_name.setdefault(record.name, []).append(record.path)
    return {name: found for name, found in by_name.items() if len(found) > 1}


def find_script(records: Sequence[ScriptRecord], requested: str, strict: bool = False) -> ScriptRecord:
    """Return the first record matching ``requested`` in traversal order.

    With ``strict`` set, more than one match is an error instead.
    """
    matches = [record for record in records if record.matches(requested)]
    if not matches:
        raise ScriptNotFoundError(
            message=f"argument not found in scripts: {requested}",
            details={"requested": requested},
        )
    if strict and len(matches) > 1:
        raise DuplicateScriptError(
            message=f"'{requested}' matches {len(matches)} scripts: {', '.join(m.path for m in matches)}",
            details={"requested": requested, "paths": [m.path for m in matches]},
        )
    return matches[0]


def build_argv(record: ScriptRecord, argv: Sequence[str]) -> List[str]:
    """Replace the typed name with the script's absolute path."""
    return [record.path, *argv[1:]]


def run_interactively(argv: Sequence[str]) -> None:
    """Run attached to our stdin/stdout/stderr and wait for it to exit."""
    logger.debug("running %s", list(argv))
    try:
        proc = subprocess.run(list(argv), check=False)
    except OSError as exc:
        raise ExecutionError(
            message=f"can't run {argv[0]}: {exc}",
            details={"argv": list(argv), "reason": str(exc)},
        ) from exc

    if proc.returncode != 0:
        raise ExecutionError(
            message=f"{argv[0]} exited with status {proc.returncode}",
            details={"argv": list(argv), "returncode": proc.returncode},
        )
