# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/log/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Pattern-based log formatting.

Design:
    - A log pattern is compiled once into an ordered list of segments
      ([`parser`][leitstand.log.parser], [`segments`][leitstand.log.segments]).
    - [`PatternFormatter`][leitstand.log.formatter.PatternFormatter] renders
      `logging.LogRecord`s with a compiled pattern.
    - The ``%x`` parameter renders the thread-scoped
      [diagnostic context][leitstand.log.context].
"""

from __future__ import annotations

from leitstand.log.errors import PatternSyntaxError
from leitstand.log.formatter import ChalkPatternFormatter, PatternFormatter
from leitstand.log.parser import PatternParser, parse
from leitstand.log.segments import RecordFormatter

__all__ = [
    "ChalkPatternFormatter",
    "PatternFormatter",
    "PatternParser",
    "PatternSyntaxError",
    "RecordFormatter",
    "parse",
]
