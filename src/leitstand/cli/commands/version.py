# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : version.py
#   file_relpath : src/leitstand/cli/commands/version.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand `version` command.

Prints the version of leitstand-commons installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from leitstand.constants import LEITSTAND_VERSION

if TYPE_CHECKING:
    from leitstand.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of leitstand-commons.",
)
def version_command() -> None:
    """Show the current version."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(console.styled(LEITSTAND_VERSION, bold=True))
