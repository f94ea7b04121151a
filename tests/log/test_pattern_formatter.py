# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : test_pattern_formatter.py
#   file_relpath : tests/log/test_pattern_formatter.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Tests for rendering records with compiled log patterns."""

from __future__ import annotations

import logging
import sys
import threading

import pytest

from leitstand.log import context
from leitstand.log.formatter import ChalkPatternFormatter, PatternFormatter
from tests.conftest import UTC_PLUS_2, make_record

LOGGER_NAME = "net.rtbrick.rbms.unittest.Logger"


def render(pattern: str, record: logging.LogRecord | None = None) -> str:
    return PatternFormatter(pattern, tz=UTC_PLUS_2).format(record or make_record())


def raised(text: str = "boom") -> tuple[type[BaseException], BaseException, object]:
    try:
        raise RuntimeError(text)
    except RuntimeError:
        exc_type, exc, tb = sys.exc_info()
        assert exc_type is not None and exc is not None
        return exc_type, exc, tb


def test_escaped_percent_renders_percent() -> None:
    assert render("%%") == "%"
    assert render("100%% done") == "100% done"


def test_newline_ignores_record_content() -> None:
    assert render("%n", make_record("anything")) == "\n"
    assert render("%n", make_record("")) == "\n"


def test_literal_text_is_copied() -> None:
    assert render("plain text") == "plain text"
    assert render("") == ""


def test_message() -> None:
    assert render("%s", make_record("Unit test")) == "Unit test"
    assert render("%s", make_record("")) == ""


def test_message_with_arguments() -> None:
    assert render("%s", make_record("Stored %s in %d ms", args=("element", 12))) == (
        "Stored element in 12 ms"
    )


def test_message_with_mismatched_arguments_renders_raw_message() -> None:
    assert render("%s", make_record("Stored %s and %s", args=("one",))) == "Stored %s and %s"


def test_unprintable_message_renders_object_representation() -> None:
    class Unprintable:
        def __str__(self) -> str:
            raise RuntimeError("no str")

    text = render("%p %s", make_record(Unprintable()))  # type: ignore[arg-type]

    assert text.startswith("INFO <")
    assert "Unprintable object at 0x" in text


def test_padded_message_only_when_non_empty() -> None:
    assert render("[%2s]", make_record("msg")) == "[  msg]"
    assert render("[%2s]", make_record("")) == "[]"


def test_level_name() -> None:
    assert render("%p", make_record(level=logging.WARNING)) == "WARNING"
    assert render("%1p", make_record(level=logging.ERROR)) == " ERROR"


def test_thrown_without_exception_is_empty() -> None:
    assert render("%1e") == ""
    assert render("%e") == ""


def test_thrown_with_exception_renders_padded_stack_trace() -> None:
    text = render("%1e", make_record(exc_info=raised("boom")))

    assert text.startswith(" Traceback (most recent call last):")
    assert text.rstrip().endswith("RuntimeError: boom")


def test_thrown_without_traceback_renders_exception_line() -> None:
    error = RuntimeError("detached")
    text = render("%e", make_record(exc_info=(RuntimeError, error, None)))

    assert text == "RuntimeError: detached\n"


def test_thrown_falls_back_to_exception_text() -> None:
    class DetachedError(Exception):
        def __str__(self) -> str:
            return "detached error"

    # A traceback object of the wrong type makes traceback formatting fail.
    error = DetachedError()
    record = make_record(exc_info=(DetachedError, error, "not a traceback"))

    assert render("%e", record) == "detached error"


def test_logger_name() -> None:
    assert render("%c", make_record(name=LOGGER_NAME)) == LOGGER_NAME


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("%.1c", "rtbrick.rbms.unittest.Logger"),
        ("%.3c", "unittest.Logger"),
        ("%.4c", "Logger"),
        ("%.9c", LOGGER_NAME),
        ("%c.1", "Logger"),
        ("%c.2", "unittest.Logger"),
        ("%c.", "Logger"),
        ("%c.5", LOGGER_NAME),
        ("%c.9", LOGGER_NAME),
        ("(%c.2)", "(unittest.Logger)"),
        ("%3c.1", "   Logger"),
    ],
)
def test_logger_name_modes(pattern: str, expected: str) -> None:
    assert render(pattern, make_record(name=LOGGER_NAME)) == expected


def test_prefix_trim_with_exactly_n_dots() -> None:
    assert render("%.1c", make_record(name="a.b")) == "b"
    assert render("%.2c", make_record(name="a.b")) == "a.b"


def test_logger_suffix_of_simple_name() -> None:
    assert render("%c.2", make_record(name="UnittestLogger")) == "UnittestLogger"
    assert render("%.1c", make_record(name="UnittestLogger")) == "UnittestLogger"


def test_timestamp_with_date_pattern() -> None:
    assert render("%d{yyyy-MM-dd HH:mm:ss.SSS}") == "2019-05-22 02:16:46.460"


def test_timestamp_default_form() -> None:
    assert render("%d") == "Wed May 22 02:16:46 UTC+02:00 2019"
    assert render("%d{}") == "Wed May 22 02:16:46 UTC+02:00 2019"


def test_timestamp_followed_by_literal_text() -> None:
    assert render("%d{HH:mm} %s", make_record("up")) == "02:16 up"


def test_diagnostic_context() -> None:
    context.push("contextual info")
    context.push("foo=bar")
    assert render("[%x]") == "[contextual info foo=bar]"

    context.clear()
    assert render("[%x]") == "[]"


def test_padded_diagnostic_context_only_when_non_empty() -> None:
    assert render("%s%1x", make_record("msg")) == "msg"
    context.push("tx=42")
    assert render("%s%1x", make_record("msg")) == "msg tx=42"


def test_thread_of_current_thread() -> None:
    assert render("%t") == threading.current_thread().name


def test_thread_of_foreign_thread() -> None:
    record = make_record()
    record.thread = threading.get_ident() + 1

    assert render("%t", record) == f"Thread: {record.thread}"


def test_thread_name_resolved_on_rendering_thread() -> None:
    formatter = PatternFormatter("%t")
    results: list[str] = []

    def work() -> None:
        results.append(formatter.format(make_record()))

    worker = threading.Thread(target=work, name="render-worker")
    worker.start()
    worker.join()

    assert results == ["render-worker"]


def test_end_to_end() -> None:
    record = make_record("Unit test", name="UnittestLogger", level=logging.WARNING)

    text = render("%d{yyyy-MM-dd HH:mm:ss.SSS} (%c) [%t] %p %s%1x%1e%n", record)

    assert text == (
        "2019-05-22 02:16:46.460 (UnittestLogger) "
        f"[{threading.current_thread().name}] WARNING Unit test\n"
    )


def test_compiled_pattern_is_shared_between_threads() -> None:
    formatter = PatternFormatter("%x|%d{HH:mm:ss.SSS}", tz=UTC_PLUS_2)
    results: dict[str, str] = {}

    def work(name: str) -> None:
        with context.scoped(name):
            results[name] = formatter.format(make_record())

    workers = [threading.Thread(target=work, args=(f"worker-{i}",)) for i in range(8)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert results == {f"worker-{i}": f"worker-{i}|02:16:46.460" for i in range(8)}


def test_formatter_plugs_into_logging_handler() -> None:
    handler = logging.Handler()
    handler.setFormatter(PatternFormatter("%p %c.1: %s"))
    record = make_record("handled", name="leitstand.test.Handler", level=logging.ERROR)

    assert handler.format(record) == "ERROR Handler: handled"


def test_chalk_formatter_keeps_rendered_text() -> None:
    record = make_record("colored", level=logging.WARNING)

    assert "colored" in ChalkPatternFormatter("%s").format(record)
