# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : pattern.py
#   file_relpath : src/leitstand/cli/commands/pattern.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand `pattern` commands.

- ``pattern check PATTERN`` compiles a log pattern and reports syntax errors.
- ``pattern render PATTERN`` renders a synthetic record emitted by the current thread.
"""

from __future__ import annotations

import logging
from datetime import timedelta, timezone
from typing import TYPE_CHECKING

import click

from leitstand.cli.errors import LeitstandPatternError, LeitstandUsageError
from leitstand.config.logging import get_logger, parse_log_level
from leitstand.log.context import scoped
from leitstand.log.errors import PatternSyntaxError
from leitstand.log.formatter import PatternFormatter

if TYPE_CHECKING:
    from leitstand.cli.console import ClickConsole

logger = get_logger(__name__)


def compile_or_fail(pattern: str, utc_offset: int | None = None) -> PatternFormatter:
    """Compile ``pattern``, translating syntax errors into a CLI error.

    Raises:
        LeitstandPatternError: If the pattern is malformed.
    """
    tz = timezone(timedelta(minutes=utc_offset)) if utc_offset is not None else None
    try:
        return PatternFormatter(pattern, tz=tz)
    except PatternSyntaxError as exc:
        marker = " " * exc.offset + "^"
        raise LeitstandPatternError(f"{exc.reason}:\n  {pattern}\n  {marker}") from exc


@click.group(name="pattern", help="Check and render log patterns.")
def pattern_command() -> None:
    """Group of log pattern commands."""


@pattern_command.command(name="check", help="Compile a log pattern and report syntax errors.")
@click.argument("pattern")
def check_command(pattern: str) -> None:
    """Compile PATTERN.

    Args:
        pattern (str): The log pattern.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    formatter = compile_or_fail(pattern)
    logger.debug("Pattern %r compiled", formatter.pattern)
    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print(console.styled("Pattern is valid:", bold=True))
        console.print(f"    {pattern}")
    else:
        console.print(console.styled("OK", fg="green"))


@pattern_command.command(name="render", help="Render a sample record with a log pattern.")
@click.argument("pattern")
@click.option("--message", "-m", default="Sample message", show_default=True, help="Message text.")
@click.option("--logger", "logger_name", default="leitstand.sample.Logger", show_default=True, help="Logger name.")
@click.option("--level", "level_name", default="INFO", show_default=True, help="Level name or number.")
@click.option(
    "--context",
    "contexts",
    multiple=True,
    help="Diagnostic context entry; may be given several times.",
)
@click.option("--exception", "exception_text", default=None, help="Attach a RuntimeError with this text.")
@click.option(
    "--utc-offset",
    type=int,
    default=None,
    help="Rendering zone offset in minutes; defaults to the local zone.",
)
def render_command(
    *,
    pattern: str,
    message: str,
    logger_name: str,
    level_name: str,
    contexts: tuple[str, ...],
    exception_text: str | None,
    utc_offset: int | None,
) -> None:
    """Render one record with PATTERN and print the result.

    Raises:
        LeitstandUsageError: If the level is unknown.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    level = parse_log_level(level_name)
    if level is None:
        raise LeitstandUsageError(f"Unknown level: {level_name}")
    formatter = compile_or_fail(pattern, utc_offset)

    exc_info = None
    if exception_text is not None:
        error = RuntimeError(exception_text)
        exc_info = (RuntimeError, error, None)
    record = logging.LogRecord(
        name=logger_name,
        level=level,
        pathname=__file__,
        lineno=0,
        msg=message,
        args=None,
        exc_info=exc_info,
    )
    with scoped(*contexts):
        text = formatter.format(record)
    console.print(text, nl=not text.endswith("\n"))
