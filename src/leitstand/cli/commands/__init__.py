# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/cli/commands/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Leitstand CLI subcommands."""
