"""Stderr logging for scripty.

stdout is reserved for script names and the scripts' own output, so every
log record goes to stderr.
"""

from __future__ import annotations

import logging
import os
import sys

from scripty.paths import LOG_LEVEL_ENV_VAR

DEFAULT_LEVEL = "WARNING"


class HumanFormatter(logging.Formatter):
    """Compact one-line records for terminal use."""

    FORMATS = {
        logging.DEBUG: "scripty [DEBUG] %(name)s: %(message)s",
        logging.INFO: "scripty [INFO]  %(name)s: %(message)s",
        logging.WARNING: "scripty [WARN]  %(name)s: %(message)s",
        logging.ERROR: "scripty [ERROR] %(name)s: %(message)s",
        logging.CRITICAL: "scripty [CRIT]  %(name)s: %(message)s",
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.FORMATS[logging.INFO])
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def _level_from_env() -> int:
    name = (os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Configure and return a logger writing to stderr."""
    logger = logging.getLogger(name)

    # Only configure once so repeated imports don't duplicate output
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(HumanFormatter())
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
        logger.propagate = False

    return logger


def set_verbose(verbose: bool) -> None:
    """Raise every scripty logger to DEBUG when verbose output was asked for."""
    if not verbose:
        return
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("scripty") and isinstance(logger, logging.Logger):
            logger.setLevel(logging.DEBUG)
