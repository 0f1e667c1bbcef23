# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : exit_codes.py
#   file_relpath : src/dcconceal/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DoubleColonConceal CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DoubleColonConceal CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
