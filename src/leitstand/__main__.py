# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : __main__.py
#   file_relpath : src/leitstand/__main__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Module entry point for running the CLI via ``python -m leitstand``.

It delegates directly to :func:`leitstand.cli.main.cli`.
"""

from __future__ import annotations

from leitstand.cli.main import cli

if __name__ == "__main__":
    cli()
