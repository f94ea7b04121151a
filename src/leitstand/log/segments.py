# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : segments.py
#   file_relpath : src/leitstand/log/segments.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Compiled log pattern segments.

A segment is a function from a `logging.LogRecord` to a string fragment.
Segments are created once when a pattern is compiled and hold no mutable
state, so a [`RecordFormatter`][leitstand.log.segments.RecordFormatter] can be
shared by any number of threads. The only state read while rendering is
thread-local: the diagnostic context and the per-thread date formatters.

Rendering a record never raises.
"""

from __future__ import annotations

import threading
import traceback
from typing import TYPE_CHECKING, Final

from leitstand.log.context import get_context
from leitstand.log.dates import DEFAULT_DATE_PATTERN, ThreadsafeDatePattern

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Iterator
    from datetime import tzinfo

    Segment = Callable[[logging.LogRecord], str]

DOT: Final[str] = "."


class RecordFormatter:
    """Ordered sequence of compiled pattern segments."""

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def add(self, segment: Segment) -> None:
        """Append a segment extracting a fragment from each record."""
        self._segments.append(segment)

    def add_literal(self, text: str) -> None:
        """Append a segment that always renders ``text``. Empty text is ignored."""
        if not text:
            return
        self._segments.append(lambda record: text)

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` by concatenating all segments in pattern order."""
        return "".join(segment(record) for segment in self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)


def padded(extractor: Segment, padding: int) -> Segment:
    """Left-pad non-empty fragments with ``padding`` spaces.

    Empty fragments stay empty, so ``"%s%1x"`` adds no trailing blank when the
    diagnostic context is empty.
    """
    if padding <= 0:
        return extractor
    prefix = " " * padding

    def segment(record: logging.LogRecord) -> str:
        text = extractor(record)
        return prefix + text if text else ""

    return segment


def safe_str(value: object) -> str:
    """Return ``str(value)``, or the default object representation if that fails."""
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def message_text(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        # msg % args mismatch or a failing __str__
        return safe_str(record.msg)


def level_name(record: logging.LogRecord) -> str:
    return record.levelname


def logger_name(record: logging.LogRecord) -> str:
    return record.name


def diagnostic_context(record: logging.LogRecord) -> str:
    return get_context()


def thread_name(record: logging.LogRecord) -> str:
    """Return the thread name if ``record`` was emitted by the executing thread.

    Names of other threads cannot be recovered from a bare id, so those
    render as ``"Thread: <id>"``.
    """
    if record.thread == threading.get_ident():
        return threading.current_thread().name
    return f"Thread: {record.thread}"


def strip_logger_prefix(name: str, count: int) -> str:
    """Remove the first ``count`` dot-delimited segments from ``name``.

    Names with fewer than ``count`` dots are returned unchanged.
    """
    i = -1
    for _ in range(count):
        i = name.find(DOT, i + 1)
        if i < 0:
            return name
    return name[i + 1 :]


def keep_logger_suffix(name: str, count: int) -> str:
    """Keep the last ``count`` dot-delimited segments of ``name``."""
    j = len(name)
    for _ in range(count):
        j = name.rfind(DOT, 0, j)
        if j < 0:
            return name
    return name[j + 1 :]


def logger_prefix_trimmed(count: int) -> Segment:
    return lambda record: strip_logger_prefix(record.name, count)


def logger_suffix(count: int) -> Segment:
    return lambda record: keep_logger_suffix(record.name, count)


def thrown(padding: int) -> Segment:
    """Render the stack trace of the record's attached exception.

    The padding precedes the trace whenever an exception is attached. If the
    trace cannot be produced, the exception's string form is rendered instead.
    """
    prefix = " " * padding

    def segment(record: logging.LogRecord) -> str:
        exc_info = record.exc_info
        if not exc_info or exc_info[1] is None:
            return ""
        try:
            text = "".join(traceback.format_exception(*exc_info))
        except Exception:
            text = safe_str(exc_info[1])
        return prefix + text

    return segment


def timestamp(date_pattern: str | None, tz: tzinfo | None = None) -> Segment:
    """Render ``record.created`` with a date pattern, or the default form if None.

    Raises:
        PatternSyntaxError: If ``date_pattern`` is invalid.
    """
    pattern = ThreadsafeDatePattern(date_pattern or DEFAULT_DATE_PATTERN, tz)
    return lambda record: pattern.format(round(record.created * 1000))
