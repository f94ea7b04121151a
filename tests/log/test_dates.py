# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : test_dates.py
#   file_relpath : tests/log/test_dates.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Tests for `%d{...}` date patterns."""

from __future__ import annotations

import threading
from datetime import timedelta, timezone

import pytest

from leitstand.log.dates import (
    DEFAULT_DATE_PATTERN,
    DateFormat,
    Field,
    ThreadsafeDatePattern,
    compile_date_pattern,
    to_datetime,
)
from leitstand.log.errors import PatternSyntaxError
from tests.conftest import UTC_PLUS_2

# 2019-05-22T00:16:46.460Z
MILLIS = 1558484206460
UTC = timezone.utc


def fmt(pattern: str, millis: int = MILLIS, tz: timezone = UTC_PLUS_2) -> str:
    return ThreadsafeDatePattern(pattern, tz).format(millis)


def test_compile_splits_literals_and_fields() -> None:
    assert compile_date_pattern("yyyy-MM-dd") == (
        Field("y", 4),
        "-",
        Field("M", 2),
        "-",
        Field("d", 2),
    )


def test_compile_quoted_text_is_literal() -> None:
    assert compile_date_pattern("HH'h'mm") == (Field("H", 2), "h", Field("m", 2))
    assert compile_date_pattern("'at' HH") == ("at ", Field("H", 2))


def test_compile_doubled_quote_is_a_quote() -> None:
    assert compile_date_pattern("hh 'o''clock'") == (Field("h", 2), " o'clock")
    assert compile_date_pattern("''") == ("'",)


def test_compile_unterminated_quote() -> None:
    with pytest.raises(PatternSyntaxError) as info:
        compile_date_pattern("HH 'oops")

    assert info.value.offset == 3


def test_compile_unsupported_letter() -> None:
    with pytest.raises(PatternSyntaxError) as info:
        compile_date_pattern("yyyy-ww")

    assert info.value.reason == "Unsupported date pattern letter 'w'"
    assert info.value.offset == 5


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("yyyy-MM-dd HH:mm:ss.SSS", "2019-05-22 02:16:46.460"),
        ("yy", "19"),
        ("y", "2019"),
        ("M", "5"),
        ("MMM", "May"),
        ("MMMM", "May"),
        ("d", "22"),
        ("D", "142"),
        ("DDD", "142"),
        ("EEE", "Wed"),
        ("EEEE", "Wednesday"),
        ("u", "3"),
        ("G", "AD"),
        ("a", "AM"),
        ("h", "2"),
        ("hh", "02"),
        ("K", "2"),
        ("k", "2"),
        ("S", "460"),
        ("Z", "+0200"),
        ("X", "+02"),
        ("XX", "+0200"),
        ("XXX", "+02:00"),
        ("z", "UTC+02:00"),
        ("'T'HH", "T02"),
    ],
)
def test_fields(pattern: str, expected: str) -> None:
    assert fmt(pattern) == expected


def test_utc_zone_designators() -> None:
    assert fmt("HH:mm X", tz=UTC) == "00:16 Z"
    assert fmt("Z", tz=UTC) == "+0000"


def test_negative_offset() -> None:
    zone = timezone(-timedelta(hours=3, minutes=30))

    assert fmt("dd HH:mm XXX Z", tz=zone) == "21 20:46 -03:30 -0330"


def test_midnight_hour_fields() -> None:
    assert fmt("H k K h a", tz=UTC) == "0 24 0 12 AM"


def test_month_names() -> None:
    # 2019-12-01T15:00:00Z
    millis = 1575212400000

    assert fmt("MMM MMMM a hh", millis, tz=UTC) == "Dec December PM 03"


def test_default_pattern() -> None:
    assert fmt(DEFAULT_DATE_PATTERN) == "Wed May 22 02:16:46 UTC+02:00 2019"


def test_to_datetime_keeps_milliseconds() -> None:
    dt = to_datetime(MILLIS, UTC)

    assert (dt.hour, dt.minute, dt.second, dt.microsecond) == (0, 16, 46, 460000)


def test_to_datetime_local_zone_is_aware() -> None:
    assert to_datetime(MILLIS).tzinfo is not None


def test_date_format_memoizes_last_timestamp() -> None:
    formatter = DateFormat(compile_date_pattern("HH:mm:ss.SSS"), UTC)

    first = formatter.format(MILLIS)
    assert formatter.format(MILLIS) is first
    assert formatter.format(MILLIS + 1) == "00:16:46.461"


def test_threadsafe_pattern_validates_eagerly() -> None:
    with pytest.raises(PatternSyntaxError):
        ThreadsafeDatePattern("yyyy-QQ")


def test_threadsafe_pattern_uses_one_formatter_per_thread() -> None:
    pattern = ThreadsafeDatePattern("HH:mm:ss.SSS", UTC)
    results: list[str] = []
    lock = threading.Lock()

    def work(offset: int) -> None:
        for i in range(50):
            text = pattern.format(MILLIS + offset * 1000 + i)
            with lock:
                results.append(text)

    workers = [threading.Thread(target=work, args=(n,)) for n in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    expected = sorted(f"00:16:{46 + n}.{460 + i:03d}" for n in range(4) for i in range(50))
    assert sorted(results) == expected
