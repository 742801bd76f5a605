# topmark:header:start
#
#   project      : ByteNot
#   file         : exit_codes.py
#   file_relpath : src/bytenot/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for ByteNot.

ByteNot aligns with the BSD `sysexits` convention so that shell pipelines and
other tooling can interpret failures consistently.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ByteNot.

    Attributes:
        SUCCESS: The pipeline reached the ``DONE`` state.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        IO_ERROR: Reading stdin or writing stdout failed. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: The OS refused access to a channel. Mirrors BSD
            ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
