"""Layered configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from resend_gateway import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader exposing ``cache_clear`` for tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names that are empty, too long, or could escape the config tree.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../secrets")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../secrets
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_layered(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load configuration: defaults -> app -> host -> user -> dotenv -> env.

    Results are cached per ``(profile, start_dir)`` for the process lifetime.
    Environment variables follow lib_layered_config's naming, e.g.
    ``RESEND_GATEWAY___RESEND__FROM_NAME``; the shorter ``RESEND_*`` variables
    are applied later by :func:`resend_gateway.adapters.resend.config.load_resend_config`.

    Args:
        profile: Optional profile name inserting ``profile/<name>/`` into all
            configuration paths.
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Raises:
        ValueError: If the profile name is invalid.

    Example:
        >>> config = get_config()
        >>> config.get("resend.from_name")
        'Argument Graph'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layered(profile=profile, start_dir=start_dir)


# lru_cache's cache_clear is not visible once the function is cast to the
# protocol, so it is attached by hand.
_get_config.cache_clear = _read_layered.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
