"""POSIX-conventional exit codes for CLI error paths.

Values follow sysexits.h and errno conventions so scripts wrapping the
CLI can tell a missing configuration apart from a failed delivery.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised through ``SystemExit`` by CLI commands.

    * 22: EINVAL, bad command-line input
    * 69: EX_UNAVAILABLE, the vendor refused or failed the request
    * 78: EX_CONFIG, Resend settings missing or placeholders

    Example:
        >>> int(ExitCode.DELIVERY_FAILURE)
        69
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    DELIVERY_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
