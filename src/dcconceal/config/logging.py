# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : logging.py
#   file_relpath : src/dcconceal/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics for the conceal surfaces: a TRACE level and yachalk-colored records.

Records go to stderr so they never mix with rendered HTML or scan output on
stdout. Level usage across the package:

    * TRACE: one record per live scan or rendered-tree pass (region and
      rewrite counts), plus code-span labeling.
    * DEBUG: rewriter generations, controller creation, settings sources and
      reconfiguration.
    * WARNING: config values of the wrong type that were ignored.

``DCCONCEAL_LOG_LEVEL`` overrides the level chosen with ``-v``/``-q``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from dcconceal.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class DcConcealLogger(logging.Logger):
    """Logger whose `trace` records per-scan detail below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log a TRACE record, e.g. the region count of one scan.

        Args:
            msg (object): Format string (%-style, formatted lazily).
            *args (object): Values for ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(DcConcealLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Colors each record by severity; TRACE scan records are blue."""

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors DCCONCEAL_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    name_to_level = {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(v)


def setup_logging(level: int | None = None) -> None:
    """Send colored records at ``level`` and above to stderr.

    Called once per CLI invocation. With ``level`` None the environment
    decides; when neither sets a level only CRITICAL records are shown.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # One handler only, even when the CLI runs several times in one process.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> DcConcealLogger:
    """Return the module logger, typed so `trace` is available."""
    logger = logging.getLogger(name)
    return cast("DcConcealLogger", logger)
