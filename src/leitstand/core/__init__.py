# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/core/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across Leitstand.

Included modules:

- ``severity``: the ERROR/WARNING/INFO severity of reasons and messages.
- ``reason``: reason codes, their module ids and severities.
- ``templates``: message templates keyed by reason code.
- ``errors``: exceptions carrying a reason code.
"""

from __future__ import annotations
