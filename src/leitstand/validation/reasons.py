# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : reasons.py
#   file_relpath : src/leitstand/validation/reasons.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Reason codes reported for invalid request entities."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Final

from leitstand.core.reason import Reason
from leitstand.core.templates import load_templates

if TYPE_CHECKING:
    from leitstand.core.templates import MessageTemplates

TEMPLATES_PACKAGE: Final[str] = "leitstand.validation"
TEMPLATES_NAME: Final[str] = "validation-messages.toml"


class ValidationReason(Reason, Enum):
    """Validation failures of request entities."""

    VAL0001E_VALUE_REQUIRED = auto()
    VAL0002E_INVALID_VALUE = auto()
    VAL0003E_IMMUTABLE_ATTRIBUTE = auto()

    def templates(self) -> MessageTemplates:
        return load_templates(TEMPLATES_PACKAGE, TEMPLATES_NAME)


def find_reason(code: str) -> ValidationReason | None:
    """Return the validation reason with reason code ``code``, if any."""
    return next((r for r in ValidationReason if r.reason_code == code), None)
