"""Turn a located marker into the run configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from scripty.errors import ConfigMissingFieldError, ConfigParseError
from scripty.locator import Marker

# Keys are matched case-insensitively; "scriptyDir" is the older spelling
SCRIPTS_DIR_KEYS = ("scriptsdir", "scriptydir")
EXTRA_COMMANDS_KEY = "extracommands"


@dataclass(frozen=True)
class Configuration:
    scripts_dir: str
    extra_commands: Dict[str, List[str]] = field(default_factory=dict)
    source: Optional[str] = None


def _lookup(data: Dict[str, Any], keys: tuple[str, ...]) -> Any:
    lowered = {str(key).lower(): value for key, value in data.items()}
    for key in keys:
        if key in lowered:
            return lowered[key]
    return None


def _parse_extra_commands(raw: Any, config_path: Path) -> Dict[str, List[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigParseError(
            message=f"extraCommands must be an object in {config_path}",
            details={"path": str(config_path), "field": "extraCommands"},
        )
    commands: Dict[str, List[str]] = {}
    for alias, argv in raw.items():
        if not isinstance(argv, list) or not all(isinstance(arg, str) for arg in argv):
            raise ConfigParseError(
                message=f"extraCommands.{alias} must be a list of strings in {config_path}",
                details={"path": str(config_path), "field": f"extraCommands.{alias}"},
            )
        commands[alias] = list(argv)
    return commands


def read_config(config_path: Path) -> Configuration:
    """Parse a config file, resolving scriptsDir against the file's directory."""
    try:
        raw = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(
            message=f"can't read config {config_path}: {exc}",
            details={"path": str(config_path)},
        ) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(
            message=f"invalid JSON in {config_path}: {exc}",
            details={"path": str(config_path), "line": exc.lineno, "column": exc.colno},
        ) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(
            message=f"config {config_path} must contain a JSON object",
            details={"path": str(config_path)},
        )

    scripts_dir = _lookup(data, SCRIPTS_DIR_KEYS)
    if scripts_dir is not None and not isinstance(scripts_dir, str):
        raise ConfigParseError(
            message=f"scriptsDir must be a string in {config_path}",
            details={"path": str(config_path), "field": "scriptsDir"},
        )
    # An empty value means the key is unset, not "the current directory"
    if not scripts_dir or not scripts_dir.strip():
        raise ConfigMissingFieldError(
            message=f"Can't read scriptsDir from {config_path}",
            details={"path": str(config_path), "field": "scriptsDir"},
        )

    resolved = os.path.normpath(config_path.parent / scripts_dir)
    return Configuration(
        scripts_dir=resolved,
        extra_commands=_parse_extra_commands(_lookup(data, (EXTRA_COMMANDS_KEY,)), config_path),
        source=str(config_path),
    )


def resolve_config(marker: Marker) -> Configuration:
    if marker.kind == "config":
        return read_config(marker.path)
    return Configuration(scripts_dir=str(marker.path))
