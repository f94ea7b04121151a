# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Pytest configuration for the Leitstand Commons test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta, timezone
from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

import pytest

from leitstand.config import logging as leitstand_logging
from leitstand.log import context
from leitstand.log.formatter import PatternFormatter

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# 2019-05-22T00:16:46.460Z
SAMPLE_CREATED: Final[float] = 1558484206.46
UTC_PLUS_2: Final[timezone] = timezone(timedelta(hours=2))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


def make_record(
    msg: str = "Sample",
    *,
    name: str = "io.leitstand.inventory.ElementService",
    level: int = logging.INFO,
    args: tuple[object, ...] | None = None,
    exc_info: Any = None,
    created: float = SAMPLE_CREATED,
) -> logging.LogRecord:
    """Return a record emitted by the calling thread at ``created``."""
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )
    record.created = created
    return record


@pytest.fixture(autouse=True)
def silence_leitstand_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the Leitstand environment variables do not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(leitstand_logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("LEITSTAND_LOG_PATTERN", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo `setup_logging` calls made by a test.

    Only pattern handlers are restored; pytest manages its own capture handlers.
    """
    root = logging.getLogger()
    before = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and isinstance(handler.formatter, PatternFormatter):
            root.removeHandler(handler)
    for handler in before:
        if isinstance(handler.formatter, PatternFormatter) and handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_diagnostic_context() -> Iterator[None]:
    """Start and end every test with an empty diagnostic context."""
    context.clear()
    yield
    context.clear()


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty working directory so no settings file is discovered.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that all log statements are exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    leitstand_logging.setup_logging(level=leitstand_logging.TRACE_LEVEL)
