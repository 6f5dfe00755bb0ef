# topmark:header:start
#
#   project      : CMDA
#   file         : logging.py
#   file_relpath : src/cmda/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA logging: a TRACE level for per-object messages and colored stderr output.

The analyzer logs one TRACE record per classified object, DEBUG records when
a content model is first seen or written, and ERROR records for membership
lists that fail to close. Levels come from ``-v``/``-q`` or ``CMDA_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from cmda.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

logging.addLevelName(TRACE_LEVEL, "TRACE")

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class CmdaLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level (below DEBUG)."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(CmdaLogger)


# Highest threshold first; the first one the record reaches picks the color.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CMDA_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (``TRACE``, ``debug``, ``WARN``...) and numbers (``10``).
    """
    raw: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    if raw == "WARN":
        raw = "WARNING"
    level: int | str = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Send records at ``level`` and above to stderr through a `ChalkFormatter`.

    Without an explicit ``level`` the environment is consulted, then WARNING
    is used, so membership lists that fail to close are always reported.
    Stdout stays reserved for the analysis report.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> CmdaLogger:
    """Return the `CmdaLogger` named ``name``."""
    return cast("CmdaLogger", logging.getLogger(name))
