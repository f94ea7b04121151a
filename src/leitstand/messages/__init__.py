# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/messages/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Messages reported while processing a request.

Design:
    - A reported condition is an immutable `Message`.
    - Messages of one request are accumulated in a `Messages` collection.
    - An operation failed if and only if an ERROR message was reported.
"""

from __future__ import annotations

from leitstand.messages.model import (
    Message,
    Messages,
    MessageStats,
    compute_message_stats,
    create_message,
    errors,
    with_severity,
)

__all__ = [
    "Message",
    "MessageStats",
    "Messages",
    "compute_message_stats",
    "create_message",
    "errors",
    "with_severity",
]
