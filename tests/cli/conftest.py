# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""CLI test helpers for running the Leitstand CLI.

`run_cli()` invokes the Click group with a fresh `CliRunner`. Tests that must
not pick up a settings file from the repository use the ``isolation`` fixture
to run from an empty working directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from leitstand.cli.exit_codes import ExitCode
from leitstand.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def run_cli(argv: str | Sequence[str] | None, *, env: Mapping[str, str] | None = None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        env (Mapping[str, str] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "pattern", "check", "%s"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_PATTERN_ERROR(result: Result) -> None:
    """Assert that the command exited with PATTERN_ERROR (code 65).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.PATTERN_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
