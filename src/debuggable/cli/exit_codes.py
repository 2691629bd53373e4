# topmark:header:start
#
#   project      : Debuggable
#   file         : exit_codes.py
#   file_relpath : src/debuggable/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the Debuggable CLI.

Error codes follow the BSD ``sysexits.h`` conventions where one applies.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Debuggable CLI.

    Attributes:
        SUCCESS (int): The command completed successfully.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage (``EX_USAGE``).
        INPUT_ERROR (int): A report description is malformed (``EX_DATAERR``).
        FILE_NOT_FOUND (int): An input file does not exist (``EX_NOINPUT``).
        CONFIG_ERROR (int): Label configuration is invalid (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    INPUT_ERROR = 65
    FILE_NOT_FOUND = 66
    CONFIG_ERROR = 78
