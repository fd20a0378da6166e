"""Layered configuration loader: bundled defaults, caching, profile validation."""

from __future__ import annotations

import pytest

from resend_gateway.adapters.config import loader
from resend_gateway.adapters.resend.config import DEFAULT_BASE_URL


@pytest.mark.os_agnostic
def test_default_config_file_is_bundled() -> None:
    path = loader.get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_bundled_defaults_describe_an_unconfigured_gateway(clear_config_cache: None) -> None:
    config = loader.get_config()

    assert config.get("resend.from_name") == "Argument Graph"
    assert config.get("resend.base_url") == DEFAULT_BASE_URL
    assert config.get("resend.timeout") == 15.0


@pytest.mark.os_agnostic
def test_get_config_is_cached(clear_config_cache: None) -> None:
    assert loader.get_config() is loader.get_config()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "..", "foo/bar"])
def test_get_config_rejects_unsafe_profiles(clear_config_cache: None, profile: str) -> None:
    with pytest.raises(ValueError):
        loader.get_config(profile=profile)


@pytest.mark.os_agnostic
def test_validate_profile_accepts_simple_names() -> None:
    loader.validate_profile("staging")
