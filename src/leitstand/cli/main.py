# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : main.py
#   file_relpath : src/leitstand/cli/main.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand command line.

Group-level options are initialized once and placed into ``ctx.obj``:

- ``console``: the [`ClickConsole`][leitstand.cli.console.ClickConsole] for program output,
- ``verbosity_level``: program-output verbosity from ``-v``/``-q``,
- ``settings``: the effective [`LoggingSettings`][leitstand.config.settings.LoggingSettings].
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from leitstand.cli.commands.pattern import pattern_command
from leitstand.cli.commands.reason import reason_command
from leitstand.cli.commands.version import version_command
from leitstand.cli.console import ClickConsole
from leitstand.cli.errors import LeitstandConfigError, LeitstandPatternError
from leitstand.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from leitstand.config.logging import get_logger, setup_logging
from leitstand.config.settings import SettingsError, load_settings
from leitstand.log.errors import PatternSyntaxError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, settings, logging) on the Click context.

    Raises:
        LeitstandConfigError: If the settings file is invalid.
        LeitstandPatternError: If the configured log pattern cannot be compiled.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    try:
        settings = load_settings(config_path)
    except SettingsError as exc:
        raise LeitstandConfigError(str(exc)) from exc
    if no_color:
        settings = replace(settings, color=False)
    ctx.obj["settings"] = settings

    try:
        setup_logging(settings=settings)
    except PatternSyntaxError as exc:
        raise LeitstandPatternError(f"Invalid logging.pattern: {exc}") from exc

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Leitstand commons CLI",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (leitstand.toml or pyproject.toml). Defaults to discovery in the working directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the Leitstand CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'leitstand pattern check PATTERN' to validate a log pattern.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(pattern_command)

cli.add_command(reason_command)

if __name__ == "__main__":
    cli()
