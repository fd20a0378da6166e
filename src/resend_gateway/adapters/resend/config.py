"""Resend configuration model and loader.

Provides the ResendConfig Pydantic model for validated, immutable gateway
settings and the loader that builds it from the layered configuration plus
the process environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final, cast

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from resend_gateway.domain.behaviors import DEFAULT_FROM_NAME

DEFAULT_BASE_URL: Final[str] = "https://api.resend.com"

#: Values shipped in example ``.env`` files; treated as "never configured".
API_KEY_PLACEHOLDERS: Final[frozenset[str]] = frozenset({"your-resend-api-key-here"})
FROM_EMAIL_PLACEHOLDERS: Final[frozenset[str]] = frozenset({"noreply@yourdomain.com", "your-email@yourdomain.com"})

#: Environment variables read directly, mapped to ResendConfig fields.
ENV_VARIABLES: Final[dict[str, str]] = {
    "RESEND_API_KEY": "api_key",
    "RESEND_FROM_EMAIL": "from_email",
    "RESEND_FROM_NAME": "from_name",
}


class ResendConfig(BaseModel):
    """Validated, immutable Resend settings.

    Placeholder values are accepted here; :attr:`is_configured` is what
    decides whether the gateway may touch the network.

    Example:
        >>> config = ResendConfig(api_key="re_123", from_email="hello@example.org")
        >>> config.is_configured
        True
        >>> config.from_name
        'Argument Graph'
        >>> ResendConfig(api_key="re_123", from_email="noreply@yourdomain.com").is_configured
        False
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    from_email: str | None = None
    from_name: str = DEFAULT_FROM_NAME
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 15.0

    @field_validator("api_key", "from_email", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Treat empty or whitespace-only strings as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("from_name", mode="before")
    @classmethod
    def _default_blank_from_name(cls, v: Any) -> Any:
        """Fall back to the default display name for None or blank values.

        Examples:
            >>> ResendConfig._default_blank_from_name("")
            'Argument Graph'
            >>> ResendConfig._default_blank_from_name("Ops")
            'Ops'
        """
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_FROM_NAME
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> ResendConfig:
        """Reject a non-positive transport timeout.

        Example:
            >>> ResendConfig(timeout=0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        return self

    @property
    def is_configured(self) -> bool:
        """Both credentials are present and neither is a known placeholder."""
        return (
            self.api_key is not None
            and self.api_key not in API_KEY_PLACEHOLDERS
            and self.from_email is not None
            and self.from_email not in FROM_EMAIL_PLACEHOLDERS
        )

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Example:
            >>> "re_secret" in repr(ResendConfig(api_key="re_secret"))
            False
        """
        fields: list[str] = []
        for name, value in self:
            if name == "api_key" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"ResendConfig({', '.join(fields)})"


def load_resend_config(
    config_dict: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
) -> ResendConfig:
    """Build ResendConfig from the ``[resend]`` section and the environment.

    ``RESEND_API_KEY``, ``RESEND_FROM_EMAIL`` and ``RESEND_FROM_NAME`` take
    precedence over the configuration section when they are set, even when
    set to an empty string.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Validated settings; missing values keep their defaults.

    Raises:
        ValueError: If ``resend`` is present but not a table.

    Example:
        >>> cfg = load_resend_config(
        ...     {"resend": {"api_key": "re_file", "from_email": "a@example.org"}},
        ...     environ={"RESEND_API_KEY": "re_env"},
        ... )
        >>> cfg.api_key, cfg.from_email
        ('re_env', 'a@example.org')
    """
    env = os.environ if environ is None else environ
    section: Any = config_dict.get("resend", {})

    if not isinstance(section, Mapping):
        raise ValueError(f"[resend] must be a table of settings, got {type(section).__name__}")

    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    for variable, field_name in ENV_VARIABLES.items():
        value = env.get(variable)
        if value is not None:
            raw[field_name] = value

    return ResendConfig.model_validate(raw)


__all__ = [
    "API_KEY_PLACEHOLDERS",
    "DEFAULT_BASE_URL",
    "ENV_VARIABLES",
    "FROM_EMAIL_PLACEHOLDERS",
    "ResendConfig",
    "load_resend_config",
]
