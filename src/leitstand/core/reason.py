# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : reason.py
#   file_relpath : src/leitstand/core/reason.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Reason codes.

A reason code is an 8 character string. The first three characters identify
the module that reports the condition, the last character its severity:

- ``E`` for [`Severity.ERROR`][leitstand.core.severity.Severity],
- ``W`` for ``Severity.WARNING``,
- ``I`` for ``Severity.INFO``.

Any other severity marker is treated as an error, so that unknown conditions
are never downgraded.

Modules enumerate their reason codes as `Enum` classes mixing in
[`Reason`][leitstand.core.reason.Reason]. Member names start with the code,
followed by a descriptive suffix:

```python
class InventoryReason(Reason, Enum):
    INV0001E_ELEMENT_NOT_FOUND = auto()
    INV0002I_ELEMENT_STORED = auto()

    def templates(self) -> MessageTemplates:
        return load_templates("inventory", "inventory-messages.toml")
```

Reason codes are fixed when a module is built. A code that is not 8 characters
long is a programming error and fails with an `AssertionError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, cast

from leitstand.core.severity import Severity
from leitstand.core.templates import EMPTY_TEMPLATES

if TYPE_CHECKING:
    from enum import Enum

    from leitstand.core.templates import MessageTemplates

REASON_CODE_LENGTH: Final[int] = 8

_SEVERITY_MARKERS: Final[dict[str, Severity]] = {
    "I": Severity.INFO,
    "W": Severity.WARNING,
}


def _check(code: str) -> None:
    assert len(code) == REASON_CODE_LENGTH, (
        f"Reason code must consist of {REASON_CODE_LENGTH} characters: {code!r}"
    )


def module_of(code: str) -> str:
    """Return the three character module id of ``code``."""
    _check(code)
    return code[:3]


def severity_of(code: str) -> Severity:
    """Return the severity encoded in the last character of ``code``."""
    _check(code)
    return _SEVERITY_MARKERS.get(code[REASON_CODE_LENGTH - 1], Severity.ERROR)


class Reason:
    """Mixin for `Enum` classes enumerating the reason codes of a module.

    Non-enum implementations override
    [`reason_code`][leitstand.core.reason.Reason.reason_code].
    """

    @property
    def reason_code(self) -> str:
        """Return the reason code, by default the first 8 characters of the member name."""
        return cast("Enum", self).name[:REASON_CODE_LENGTH]

    @property
    def module(self) -> str:
        """Return the module that reports this reason."""
        return module_of(self.reason_code)

    @property
    def severity(self) -> Severity:
        """Return the severity of this reason."""
        return severity_of(self.reason_code)

    def templates(self) -> MessageTemplates:
        """Return the message templates of the module. Override per module."""
        return EMPTY_TEMPLATES

    def get_message(self, *args: object) -> str:
        """Return the message text for ``args``.

        Never raises; see [`MessageTemplates.format`][leitstand.core.templates.MessageTemplates.format].
        """
        return self.templates().format(self.reason_code, *args)
