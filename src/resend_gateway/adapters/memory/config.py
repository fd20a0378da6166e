"""In-memory configuration adapters for testing.

Provides configuration functions that satisfy the same Protocols as
production adapters but operate entirely in memory -- no filesystem,
no environment lookups, no logging runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..resend.config import ResendConfig, load_resend_config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def init_logging_in_memory(config: Config) -> None:
    """No-op -- leaves the std logging setup untouched."""


def load_resend_config_in_memory(
    config_dict: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> ResendConfig:
    """Parse the ``[resend]`` section, ignoring the process environment unless one is passed."""
    return load_resend_config(config_dict, environ=environ if environ is not None else {})


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_resend_config_in_memory",
]
