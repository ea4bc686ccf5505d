"""Upward search for the scripts root.

Starting from a directory, walk towards the filesystem root and stop at the
first level holding either the config file or the scripts directory. The
config file wins when both sit at the same level.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Literal

from scripty import paths
from scripty.errors import DirReadError, RootNotFoundError
from scripty.log import get_logger

logger = get_logger(__name__)

MarkerKind = Literal["config", "scripts_dir"]
ListingPolicy = Callable[[Path, OSError], List[str]]


@dataclass(frozen=True)
class Marker:
    kind: MarkerKind
    path: Path


def permissive_listing(directory: Path, exc: OSError) -> List[str]:
    """Treat an unreadable directory as empty so the walk keeps going up."""
    logger.debug("ignoring unreadable directory %s: %s", directory, exc)
    return []


def strict_listing(directory: Path, exc: OSError) -> List[str]:
    raise DirReadError(
        message=f"can't read dir: {directory}",
        details={"path": str(directory), "reason": str(exc)},
    )


def _entry_names(directory: Path, on_listing_error: ListingPolicy) -> List[str]:
    try:
        return os.listdir(directory)
    except OSError as exc:
        return on_listing_error(directory, exc)


def _marker_at(directory: Path, names: List[str], scripts_dir_name: str) -> Marker | None:
    if paths.CONFIG_FILE_NAME in names:
        return Marker("config", paths.config_file_path(directory))
    if scripts_dir_name in names:
        candidate = directory / scripts_dir_name
        if candidate.is_dir():
            return Marker("scripts_dir", candidate)
    return None


def locate(
    start_dir: Path | str,
    scripts_dir_name: str | None = None,
    on_listing_error: ListingPolicy = permissive_listing,
) -> Marker:
    """Return the nearest marker at or above ``start_dir``.

    Raises RootNotFoundError once the filesystem root has been searched
    without a match.
    """
    dir_name = scripts_dir_name or paths.scripts_dir_name()
    current = Path(start_dir).resolve()
    visited: set[Path] = set()

    while current not in visited:
        visited.add(current)
        logger.debug("searching %s", current)

        marker = _marker_at(current, _entry_names(current, on_listing_error), dir_name)
        if marker is not None:
            logger.debug("found %s marker at %s", marker.kind, marker.path)
            return marker

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise RootNotFoundError(
        message=f"No config file or scripty dir '{dir_name}' found",
        details={"start_dir": str(start_dir), "scripts_dir_name": dir_name},
    )
