# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/config/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Logging configuration: the TRACE-aware logger class and TOML/environment settings."""

from __future__ import annotations
