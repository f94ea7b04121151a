# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : exit_codes.py
#   file_relpath : src/leitstand/cli/exit_codes.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Standardized exit codes of the Leitstand CLI.

The codes follow the BSD ``sysexits`` convention where practical so other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Leitstand CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. a reason with ERROR severity was rendered.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        PATTERN_ERROR: A log pattern could not be compiled. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed settings).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    PATTERN_ERROR = 65
    CONFIG_ERROR = 78
