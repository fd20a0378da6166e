"""Apply ``--set SECTION.KEY=VALUE`` command-line overrides to a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Decode JSON scalars and containers, keeping anything else as a string.

    Examples:
        >>> coerce_value("15.5")
        15.5
        >>> coerce_value("false")
        False
        >>> coerce_value("Ops Team")
        'Ops Team'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: When ``=`` or the section dot is missing, or a path
            component is empty.

    Examples:
        >>> parse_override("resend.timeout=30")
        ConfigOverride(section='resend', key_path=('timeout',), value=30)
        >>> parse_override("resend.from_name=A=B").value
        'A=B'
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _insert(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = tree.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge parsed overrides into ``config`` via ``Config.with_overrides``.

    Returns ``config`` itself when there is nothing to apply.

    Examples:
        >>> cfg = Config({"resend": {"timeout": 15.0}}, {})
        >>> apply_overrides(cfg, ("resend.timeout=30",))["resend"]["timeout"]
        30
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _insert(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
