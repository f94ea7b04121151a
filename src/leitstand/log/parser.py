# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : parser.py
#   file_relpath : src/leitstand/log/parser.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Compiler for printf-like log patterns.

The pattern is scanned once, left to right. Text outside parameters is copied
verbatim; each ``%`` parameter becomes a segment of the resulting
[`RecordFormatter`][leitstand.log.segments.RecordFormatter].

Parameters:
    * ``%%``: a literal ``%``.
    * ``%n``: a newline.
    * ``%s``: the message text.
    * ``%p``: the level name.
    * ``%t``: the thread name, or ``Thread: <id>`` for records of other threads.
    * ``%e``: the stack trace of the attached exception.
    * ``%x``: the diagnostic context of the rendering thread.
    * ``%c``: the logger name; ``%c.<N>`` keeps the last N segments (``%c.`` keeps one);
      ``%.<N>c`` strips the first N segments.
    * ``%d``: the timestamp in the default form; ``%d{<date pattern>}`` uses a
      [date pattern][leitstand.log.dates].

A decimal width directly after ``%`` left-pads ``%s``, ``%p``, ``%e``, ``%x`` and
the ``%c``/``%c.<N>`` forms with spaces when the rendered fragment is non-empty,
e.g. ``%1x`` renders ``" tx=42"`` or nothing.

Anything else after ``%`` is rejected with a
[`PatternSyntaxError`][leitstand.log.errors.PatternSyntaxError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from leitstand.config.logging import get_logger
from leitstand.log import segments
from leitstand.log.errors import PatternSyntaxError
from leitstand.log.segments import RecordFormatter

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import tzinfo

    from leitstand.config.logging import LeitstandLogger

logger: LeitstandLogger = get_logger(__name__)

PARAMETER: Final[str] = "%"
DIAGNOSTIC: Final[str] = "x"
LOGGER: Final[str] = "c"
MESSAGE: Final[str] = "s"
NEWLINE: Final[str] = "n"
PRIORITY: Final[str] = "p"
THREAD: Final[str] = "t"
THROWN: Final[str] = "e"
TIMESTAMP: Final[str] = "d"
START_FORMAT: Final[str] = "{"
END_FORMAT: Final[str] = "}"
DOT: Final[str] = "."

# Parameters accepting a left-padding width.
PADDED: Final[frozenset[str]] = frozenset({MESSAGE, PRIORITY, THROWN, DIAGNOSTIC, LOGGER})


def _scan_digits(pattern: str, offset: int) -> tuple[str, int]:
    """Return the digit run starting at ``offset`` and the index after it."""
    i = offset
    while i < len(pattern) and pattern[i].isdigit():
        i += 1
    return pattern[offset:i], i


class PatternParser:
    """Compiles log patterns into [`RecordFormatter`][leitstand.log.segments.RecordFormatter]s.

    Args:
        tz (tzinfo | None): Zone used by ``%d`` segments; None selects the
            process local zone.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz
        self._handlers: dict[str, Callable[[RecordFormatter, str, int, int], int]] = {
            DIAGNOSTIC: self._diagnostic_segment,
            LOGGER: self._logger_segment,
            MESSAGE: self._message_segment,
            NEWLINE: self._newline_segment,
            PRIORITY: self._level_segment,
            THREAD: self._thread_segment,
            THROWN: self._thrown_segment,
            TIMESTAMP: self._timestamp_segment,
            PARAMETER: self._parameter_segment,
        }

    def parse(self, pattern: str) -> RecordFormatter:
        """Compile ``pattern``.

        Args:
            pattern (str): The log pattern.

        Returns:
            RecordFormatter: The compiled segment sequence.

        Raises:
            PatternSyntaxError: If the pattern is malformed.
        """
        formatter = RecordFormatter()
        buffer: list[str] = []
        i = 0
        while i < len(pattern):
            c = pattern[i]
            if c == PARAMETER:
                formatter.add_literal("".join(buffer))
                buffer = []
                i = self._scan_parameter(formatter, pattern, i + 1)
                continue
            buffer.append(c)
            i += 1
        formatter.add_literal("".join(buffer))
        logger.trace("Compiled log pattern %r into %d segment(s)", pattern, len(formatter))
        return formatter

    def _scan_parameter(self, formatter: RecordFormatter, pattern: str, offset: int) -> int:
        """Compile the parameter following the ``%`` at ``offset - 1``.

        Returns:
            int: The index of the first character after the parameter.
        """
        if offset < len(pattern) and pattern[offset] == DOT:
            return self._logger_prefix_segment(formatter, pattern, offset + 1)

        digits, i = _scan_digits(pattern, offset)
        if i >= len(pattern):
            raise PatternSyntaxError("Incomplete parameter", pattern, offset - 1)
        c = pattern[i]
        handler = self._handlers.get(c)
        if handler is None:
            raise PatternSyntaxError(f"Unknown parameter {PARAMETER}{c}", pattern, i)
        if digits and c not in PADDED:
            raise PatternSyntaxError(f"Padding is not supported for {PARAMETER}{c}", pattern, offset)
        return handler(formatter, pattern, i, int(digits) if digits else 0)

    def _logger_prefix_segment(self, formatter: RecordFormatter, pattern: str, offset: int) -> int:
        digits, i = _scan_digits(pattern, offset)
        if not digits:
            raise PatternSyntaxError("Expected number of logger segments to strip", pattern, offset)
        if i >= len(pattern) or pattern[i] != LOGGER:
            raise PatternSyntaxError(f"Expected {LOGGER!r} after {PARAMETER}.{digits}", pattern, i)
        formatter.add(segments.logger_prefix_trimmed(int(digits)))
        return i + 1

    def _logger_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        if i + 1 < len(pattern) and pattern[i + 1] == DOT:
            digits, end = _scan_digits(pattern, i + 2)
            count = int(digits) if digits else 1
            if count == 0:
                raise PatternSyntaxError("Logger suffix must keep at least one segment", pattern, i + 2)
            formatter.add(segments.padded(segments.logger_suffix(count), padding))
            return end
        formatter.add(segments.padded(segments.logger_name, padding))
        return i + 1

    def _message_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add(segments.padded(segments.message_text, padding))
        return i + 1

    def _level_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add(segments.padded(segments.level_name, padding))
        return i + 1

    def _diagnostic_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add(segments.padded(segments.diagnostic_context, padding))
        return i + 1

    def _thrown_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add(segments.thrown(padding))
        return i + 1

    def _thread_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add(segments.thread_name)
        return i + 1

    def _newline_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add_literal("\n")
        return i + 1

    def _parameter_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        formatter.add_literal(PARAMETER)
        return i + 1

    def _timestamp_segment(self, formatter: RecordFormatter, pattern: str, i: int, padding: int) -> int:
        start = i + 1
        if start >= len(pattern) or pattern[start] != START_FORMAT:
            formatter.add(segments.timestamp(None, self.tz))
            return start
        end = pattern.find(END_FORMAT, start + 1)
        if end < 0:
            raise PatternSyntaxError(f"Unterminated date pattern, expected {END_FORMAT!r}", pattern, start)
        try:
            formatter.add(segments.timestamp(pattern[start + 1 : end], self.tz))
        except PatternSyntaxError as exc:
            raise PatternSyntaxError(exc.reason, pattern, start + 1 + exc.offset) from exc
        return end + 1


def parse(pattern: str, tz: tzinfo | None = None) -> RecordFormatter:
    """Compile ``pattern`` with a fresh [`PatternParser`][leitstand.log.parser.PatternParser].

    Raises:
        PatternSyntaxError: If the pattern is malformed.
    """
    return PatternParser(tz=tz).parse(pattern)
