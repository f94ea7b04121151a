# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : logging.py
#   file_relpath : src/leitstand/config/logging.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand logging setup with TRACE level and pattern-based output.

This module extends the standard logging module with a custom TRACE level, a
specialized logger class, and a handler whose lines are produced by
[`PatternFormatter`][leitstand.log.formatter.PatternFormatter], optionally
colored by severity.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import tzinfo

    from leitstand.config.settings import LoggingSettings
    from leitstand.log.formatter import PatternFormatter

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "LEITSTAND_LOG_LEVEL"


class LeitstandLogger(logging.Logger):
    """Custom logger class for Leitstand with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
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

logging.setLoggerClass(LeitstandLogger)


DEFAULT_PATTERN: Final[str] = "[%p] %s%1x%1e"
DEBUG_PATTERN: Final[str] = "%d{HH:mm:ss.SSS} [%p] [%t] (%c.2) %s%1x%1e"

_NAME_TO_LEVEL: Final[dict[str, int]] = {
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


def colorize(level: int, text: str) -> str:
    """Color a rendered log line according to its numeric level.

    Args:
        level (int): The numeric logging level of the record.
        text (str): The rendered log line.

    Returns:
        str: The colorized line.
    """
    if level >= logging.CRITICAL:
        return chalk.red_bright(text)
    if level >= logging.ERROR:
        return chalk.red(text)
    if level >= logging.WARNING:
        return chalk.yellow(text)
    if level >= logging.INFO:
        return chalk.green(text)
    if level >= logging.DEBUG:
        return chalk.gray(text)
    if level >= TRACE_LEVEL:
        return chalk.blue(text)
    # Fallback color for unknown or lower-than-TRACE levels
    return chalk.dim.red(text)


def parse_log_level(value: str | int | None) -> int | None:
    """Parse a level name (``"TRACE"``, ``"warn"``) or number into a logging level.

    Returns:
        int | None: The numeric level, or None if ``value`` is empty or unknown.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    v = value.strip().upper()
    if not v:
        return None
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors LEITSTAND_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def create_formatter(
    pattern: str,
    *,
    color: bool = False,
    tz: tzinfo | None = None,
) -> PatternFormatter:
    """Build the formatter used by the Leitstand stream handler.

    Raises:
        PatternSyntaxError: If ``pattern`` cannot be compiled.
    """
    from leitstand.log.formatter import ChalkPatternFormatter, PatternFormatter

    if color:
        return ChalkPatternFormatter(pattern, tz=tz)
    return PatternFormatter(pattern, tz=tz)


def setup_logging(
    level: int | None = None,
    settings: LoggingSettings | None = None,
) -> None:
    """Configure the root logger with a pattern formatter.

    If ``level`` is None, the settings level is used, then the environment via
    [`resolve_env_log_level`][leitstand.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Args:
        level (int | None): Explicit root logger level.
        settings (LoggingSettings | None): Pattern, color and zone settings. When
            omitted, the detailed pattern is used below INFO and the short one otherwise.

    Raises:
        PatternSyntaxError: If the pattern cannot be compiled. The existing
            handlers are left in place.
    """
    if level is None:
        level = (settings.level if settings else None) or resolve_env_log_level() or logging.CRITICAL

    if settings is not None:
        formatter = create_formatter(settings.pattern, color=settings.color, tz=settings.zone)
    else:
        formatter = create_formatter(
            DEFAULT_PATTERN if level >= logging.INFO else DEBUG_PATTERN,
            color=True,
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Disable propagation to avoid duplicate logs in parent loggers
    root_logger.propagate = False


def get_logger(name: str) -> LeitstandLogger:
    """Retrieve a LeitstandLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        LeitstandLogger: A LeitstandLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("LeitstandLogger", logger)
