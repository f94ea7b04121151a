# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : reason.py
#   file_relpath : src/leitstand/cli/commands/reason.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand `reason` command.

Explains a reason code: the reporting module, the severity and the rendered
message. Codes without a bundled template render the fallback form
``CODE[arg, ...]``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from leitstand.cli.errors import LeitstandUsageError
from leitstand.core.reason import REASON_CODE_LENGTH, module_of, severity_of
from leitstand.core.templates import fallback_message
from leitstand.messages.model import Message, create_message
from leitstand.validation.reasons import find_reason

if TYPE_CHECKING:
    from leitstand.cli.console import ClickConsole


def explain(code: str, args: tuple[str, ...]) -> Message:
    """Return the message reported for ``code`` with ``args``.

    Raises:
        LeitstandUsageError: If ``code`` is not a valid reason code.
    """
    if len(code) != REASON_CODE_LENGTH:
        raise LeitstandUsageError(
            f"Reason code must consist of {REASON_CODE_LENGTH} characters: {code!r}"
        )
    reason = find_reason(code)
    if reason is not None:
        return create_message(reason, *args)
    return Message(severity=severity_of(code), reason=code, message=fallback_message(code, args))


@click.command(name="reason", help="Explain a reason code and render its message.")
@click.argument("code")
@click.argument("args", nargs=-1)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the message as JSON.")
def reason_command(*, code: str, args: tuple[str, ...], as_json: bool) -> None:
    """Explain CODE, substituting ARGS into its message template.

    Args:
        code (str): The 8 character reason code, e.g. ``VAL0001E``.
        args (tuple[str, ...]): Message template arguments.
        as_json (bool): Print the message in the API response form.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    message = explain(code.upper(), args)

    if as_json:
        console.print(json.dumps({"module": module_of(message.reason), **message.to_dict()}))
        return

    severity = message.severity.value
    if console.enable_color:
        severity = message.severity.color(severity)
    console.print(f"module:   {module_of(message.reason)}")
    console.print(f"severity: {severity}")
    console.print(f"message:  {message.message}")
