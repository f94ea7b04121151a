# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/validation/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Reason codes and message templates for request validation."""

from __future__ import annotations

from leitstand.validation.reasons import ValidationReason, find_reason

__all__ = ["ValidationReason", "find_reason"]
