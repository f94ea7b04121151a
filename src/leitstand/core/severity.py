# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : severity.py
#   file_relpath : src/leitstand/core/severity.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Severity of reason codes and reported messages."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class Severity(Enum):
    """Severity levels of reasons and messages.

    An operation is considered failed as soon as one ERROR message was reported,
    regardless of accompanying warnings and infos.
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.INFO: chalk.blue,
                Severity.WARNING: chalk.yellow,
                Severity.ERROR: chalk.red_bright,
            }[self],
        )
