# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : dates.py
#   file_relpath : src/leitstand/log/dates.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Date patterns for the ``%d{...}`` log pattern parameter.

Date patterns use the ``SimpleDateFormat`` letter vocabulary that operators
already know from JVM logging configurations, e.g. ``yyyy-MM-dd HH:mm:ss.SSS``.

Sections:
    * compile_date_pattern: turns a pattern into an immutable token tuple.
    * DateFormat: renders epoch milliseconds, memoizing the last result.
    * ThreadsafeDatePattern: one `DateFormat` per rendering thread.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Final

from leitstand.log.errors import PatternSyntaxError

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import tzinfo

DEFAULT_DATE_PATTERN: Final[str] = "EEE MMM dd HH:mm:ss zzz yyyy"

MONTHS: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAYS: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

QUOTE: Final[str] = "'"


def _number(value: int, count: int) -> str:
    return f"{value:0{count}d}"


def _year(dt: datetime, count: int) -> str:
    if count == 2:
        return _number(dt.year % 100, 2)
    return _number(dt.year, count)


def _month(dt: datetime, count: int) -> str:
    if count >= 4:
        return MONTHS[dt.month - 1]
    if count == 3:
        return MONTHS[dt.month - 1][:3]
    return _number(dt.month, count)


def _weekday(dt: datetime, count: int) -> str:
    name = WEEKDAYS[dt.weekday()]
    return name if count >= 4 else name[:3]


def _offset_minutes(dt: datetime) -> int:
    offset = dt.utcoffset()
    return int(offset.total_seconds() // 60) if offset is not None else 0


def _rfc822_zone(dt: datetime, count: int) -> str:
    minutes = _offset_minutes(dt)
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{mins:02d}"


def _iso_zone(dt: datetime, count: int) -> str:
    minutes = _offset_minutes(dt)
    if minutes == 0:
        return "Z"
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    if count == 1:
        return f"{sign}{hours:02d}"
    if count == 2:
        return f"{sign}{hours:02d}{mins:02d}"
    return f"{sign}{hours:02d}:{mins:02d}"


FIELDS: Final[dict[str, Callable[[datetime, int], str]]] = {
    "G": lambda dt, n: "AD",
    "y": _year,
    "M": _month,
    "d": lambda dt, n: _number(dt.day, n),
    "D": lambda dt, n: _number(dt.timetuple().tm_yday, n),
    "E": _weekday,
    "u": lambda dt, n: _number(dt.isoweekday(), n),
    "a": lambda dt, n: "AM" if dt.hour < 12 else "PM",
    "H": lambda dt, n: _number(dt.hour, n),
    "k": lambda dt, n: _number(dt.hour or 24, n),
    "K": lambda dt, n: _number(dt.hour % 12, n),
    "h": lambda dt, n: _number(dt.hour % 12 or 12, n),
    "m": lambda dt, n: _number(dt.minute, n),
    "s": lambda dt, n: _number(dt.second, n),
    "S": lambda dt, n: _number(dt.microsecond // 1000, n),
    "z": lambda dt, n: dt.tzname() or "",
    "Z": _rfc822_zone,
    "X": _iso_zone,
}


@dataclass(frozen=True, slots=True)
class Field:
    """A run of identical pattern letters, e.g. ``yyyy``."""

    letter: str
    count: int

    def render(self, dt: datetime) -> str:
        return FIELDS[self.letter](dt, self.count)


Token = str | Field


def compile_date_pattern(pattern: str) -> tuple[Token, ...]:
    """Compile a date pattern into literal strings and `Field` tokens.

    Args:
        pattern (str): The date pattern, e.g. ``"yyyy-MM-dd HH:mm:ss.SSS"``.

    Returns:
        tuple[Token, ...]: The tokens in pattern order; adjacent literals are merged.

    Raises:
        PatternSyntaxError: On an unsupported pattern letter or an unterminated quote.
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == QUOTE:
            if i + 1 < n and pattern[i + 1] == QUOTE:
                literal.append(QUOTE)
                i += 2
                continue
            start = i
            i += 1
            while True:
                if i >= n:
                    raise PatternSyntaxError("Unterminated quote", pattern, start)
                if pattern[i] == QUOTE:
                    if i + 1 < n and pattern[i + 1] == QUOTE:
                        literal.append(QUOTE)
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue
        if c.isascii() and c.isalpha():
            if c not in FIELDS:
                raise PatternSyntaxError(f"Unsupported date pattern letter {c!r}", pattern, i)
            j = i
            while j < n and pattern[j] == c:
                j += 1
            flush()
            tokens.append(Field(c, j - i))
            i = j
            continue
        literal.append(c)
        i += 1
    flush()
    return tuple(tokens)


def to_datetime(millis: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz`` (local zone if None)."""
    seconds, ms = divmod(millis, 1000)
    dt = datetime.fromtimestamp(seconds, timezone.utc)
    dt = dt.astimezone(tz) if tz is not None else dt.astimezone()
    return dt.replace(microsecond=ms * 1000)


class DateFormat:
    """Renders epoch milliseconds with a compiled token sequence.

    Instances remember the last rendered timestamp and are therefore not safe
    to share between threads; see `ThreadsafeDatePattern`.
    """

    def __init__(self, tokens: tuple[Token, ...], tz: tzinfo | None = None) -> None:
        self._tokens = tokens
        self._tz = tz
        self._last_millis: int | None = None
        self._last_text: str = ""

    def format(self, millis: int) -> str:
        if millis == self._last_millis:
            return self._last_text
        dt = to_datetime(millis, self._tz)
        text = "".join(t if isinstance(t, str) else t.render(dt) for t in self._tokens)
        self._last_millis = millis
        self._last_text = text
        return text


class ThreadsafeDatePattern:
    """A compiled date pattern that keeps one `DateFormat` per rendering thread.

    The pattern is validated eagerly when the instance is created.

    Args:
        pattern (str): The date pattern.
        tz (tzinfo | None): Rendering zone; None selects the process local zone.

    Raises:
        PatternSyntaxError: If ``pattern`` is invalid.
    """

    def __init__(self, pattern: str, tz: tzinfo | None = None) -> None:
        self.pattern = pattern
        self._tokens = compile_date_pattern(pattern)
        self._tz = tz
        self._cache = threading.local()

    def format(self, millis: int) -> str:
        formatter: DateFormat | None = getattr(self._cache, "formatter", None)
        if formatter is None:
            formatter = DateFormat(self._tokens, self._tz)
            self._cache.formatter = formatter
        return formatter.format(millis)
