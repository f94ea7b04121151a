# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : errors.py
#   file_relpath : src/leitstand/log/errors.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Errors raised while compiling log and date patterns."""

from __future__ import annotations


class PatternSyntaxError(ValueError):
    """A log or date pattern could not be compiled.

    Attributes:
        reason (str): Short description of the problem.
        pattern (str): The pattern being compiled.
        offset (int): Zero-based position of the offending character.
    """

    def __init__(self, reason: str, pattern: str, offset: int) -> None:
        super().__init__(f"{reason} at offset {offset} in pattern {pattern!r}")
        self.reason = reason
        self.pattern = pattern
        self.offset = offset
