"""Marker names and lookup constants for the scripts root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

# Config file that pins the scripts root for a project
CONFIG_FILE_NAME = ".scripty.json"

# Conventional scripts directory name, overridable via SCRIPTY_DIR
DEFAULT_SCRIPTS_DIR_NAME = "scripts"
SCRIPTS_DIR_ENV_VAR = "SCRIPTY_DIR"
LOG_LEVEL_ENV_VAR = "SCRIPTY_LOG_LEVEL"

# Checked in order; the first suffix a filename ends with is stripped
SUFFIX_WHITELIST = (".sh", ".py")

# Lines skipped (blank or shebang) before giving up on a description
DESCRIPTION_LOOKAHEAD = 20


def scripts_dir_name(environ: Mapping[str, str] | None = None) -> str:
    """Return the scripts directory name to search for."""
    env = os.environ if environ is None else environ
    return env.get(SCRIPTS_DIR_ENV_VAR) or DEFAULT_SCRIPTS_DIR_NAME


def config_file_path(directory: Path) -> Path:
    """Return path to the config file inside a directory. Does not check existence."""
    return directory / CONFIG_FILE_NAME
