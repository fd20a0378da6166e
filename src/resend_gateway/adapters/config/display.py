"""Display configuration through lib_layered_config with secrets masked.

Pending log output is flushed first so log lines do not interleave with
the rendered configuration.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from resend_gateway.domain.enums import OutputFormat

REDACTED = "[REDACTED]"


def redact_secrets(config: Config) -> Config:
    """Return a Config whose ``resend.api_key`` is masked when set.

    lib_layered_config masks keys it recognises as secrets on its own; this
    runs regardless, so the key stays hidden whatever the library version
    treats as sensitive.

    Example:
        >>> cfg = Config({"resend": {"api_key": "re_live_123"}}, {})
        >>> redact_secrets(cfg)["resend"]["api_key"]
        '[REDACTED]'
        >>> empty = Config({"resend": {"api_key": ""}}, {})
        >>> redact_secrets(empty) is empty
        True
    """
    section: Any = config.get("resend", default={})
    if not isinstance(section, dict) or not cast(dict[str, Any], section).get("api_key"):
        return config
    return config.with_overrides({"resend": {"api_key": REDACTED}})


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: HUMAN for TOML-like display, JSON for JSON.
        section: Only display this section when given.
        console: Rich Console override, mainly for tests.
        profile: Profile name included in provenance comments.

    Raises:
        ValueError: If the requested section doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(redact_secrets(config), output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["REDACTED", "display_config", "redact_secrets"]
