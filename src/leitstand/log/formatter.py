# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : formatter.py
#   file_relpath : src/leitstand/log/formatter.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""`logging.Formatter` implementations backed by compiled log patterns.

Example:
    ```python
    handler = logging.StreamHandler()
    handler.setFormatter(PatternFormatter("%d{yyyy-MM-dd HH:mm:ss.SSS} (%c) [%t] %p %s%1x%1e"))
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leitstand.config.logging import colorize
from leitstand.log.parser import PatternParser

if TYPE_CHECKING:
    from datetime import tzinfo

    from leitstand.log.segments import RecordFormatter


class PatternFormatter(logging.Formatter):
    """Formatter that renders records with a log pattern compiled at construction.

    Args:
        pattern (str): The log pattern.
        tz (tzinfo | None): Zone used by ``%d`` parameters. None selects the
            process local zone.

    Raises:
        PatternSyntaxError: If ``pattern`` is malformed, so that a bad pattern
            fails when logging is configured instead of on every record.
    """

    def __init__(self, pattern: str, tz: tzinfo | None = None) -> None:
        super().__init__()
        self.pattern = pattern
        self._formatter: RecordFormatter = PatternParser(tz=tz).parse(pattern)

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with the compiled pattern.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The rendered log line.
        """
        return self._formatter.format(record)


class ChalkPatternFormatter(PatternFormatter):
    """Pattern formatter that colors whole lines by severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record and apply the color of its level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized log line.
        """
        return colorize(record.levelno, super().format(record))
