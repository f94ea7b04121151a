# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : errors.py
#   file_relpath : src/leitstand/cli/errors.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Exceptions for the Leitstand CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from leitstand.cli.exit_codes import ExitCode


class LeitstandCliError(click.ClickException):
    """Base class for all Leitstand CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class LeitstandUsageError(LeitstandCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LeitstandPatternError(LeitstandCliError):
    """Error for log patterns that cannot be compiled."""

    exit_code = ExitCode.PATTERN_ERROR


class LeitstandConfigError(LeitstandCliError):
    """Error for configuration errors (missing/invalid/malformed settings)."""

    exit_code = ExitCode.CONFIG_ERROR
