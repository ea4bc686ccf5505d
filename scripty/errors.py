from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional


@dataclass
class ScriptyError(Exception):
    message: str
    details: Optional[Dict[str, Any]] = None

    error_code: ClassVar[str] = "SCRIPTY_ERROR"
    exit_code: ClassVar[int] = 1

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def exit_status(self) -> int:
        return self.exit_code


class RootNotFoundError(ScriptyError):
    error_code = "ROOT_NOT_FOUND"


class DirReadError(ScriptyError):
    error_code = "DIR_READ_ERROR"


class ConfigParseError(ScriptyError):
    error_code = "CONFIG_PARSE_ERROR"


class ConfigMissingFieldError(ScriptyError):
    error_code = "CONFIG_MISSING_FIELD"


class ScriptReadError(ScriptyError):
    error_code = "SCRIPT_READ_ERROR"


class ScriptNotFoundError(ScriptyError):
    error_code = "SCRIPT_NOT_FOUND"


class DuplicateScriptError(ScriptyError):
    error_code = "DUPLICATE_SCRIPT"


class ExecutionError(ScriptyError):
    error_code = "EXECUTION_ERROR"

    def exit_status(self) -> int:
        # Signals show up as negative return codes; those map to plain failure
        returncode = (self.details or {}).get("returncode")
        if isinstance(returncode, int) and returncode > 0:
            return returncode
        return self.exit_code
