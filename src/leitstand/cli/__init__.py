# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __init__.py
#   file_relpath : src/leitstand/cli/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Click-based command line for checking log patterns and explaining reason codes."""
