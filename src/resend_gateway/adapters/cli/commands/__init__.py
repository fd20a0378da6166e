"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Resend commands from :mod:`.resend_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .resend_cmd import cli_check, cli_send_email, cli_test_connection

__all__ = [
    "cli_check",
    "cli_config",
    "cli_info",
    "cli_send_email",
    "cli_test_connection",
]
