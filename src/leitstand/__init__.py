# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand Commons.

Shared building blocks of the Leitstand management system: reason codes and
their severities, per-request message collections, and a pattern-based
`logging` formatter with a thread-scoped diagnostic context.
"""

from __future__ import annotations
