# topmark:header:start
#
#   project      : CMDA
#   file         : exit_codes.py
#   file_relpath : src/cmda/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the CMDA CLI application.

The values follow the BSD ``sysexits.h`` conventions where one applies, so
scripts can distinguish configuration problems from I/O failures.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for CMDA CLI.

    Attributes:
        SUCCESS (int): Analysis completed; every artifact was written.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage.
        CLASSIFICATION_ERROR (int): The classifier or an input object failed.
        UNEXPECTED_ERROR (int): Unhandled internal error.
        PRECONDITION_FAILED (int): The output directory is not empty.
        IO_ERROR (int): Writing output failed.
        CONFIG_ERROR (int): Configuration missing or invalid.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    CLASSIFICATION_ERROR = 65
    UNEXPECTED_ERROR = 70
    PRECONDITION_FAILED = 73
    IO_ERROR = 74
    CONFIG_ERROR = 78
