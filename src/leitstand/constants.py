# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : constants.py
#   file_relpath : src/leitstand/constants.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand Commons constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LEITSTAND_VERSION: str = get_version("leitstand-commons")
