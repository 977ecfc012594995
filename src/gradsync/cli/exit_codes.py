"""
Exit Codes - Process exit codes for the command line.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by gradsync commands."""

    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    CANCELLED = 130
