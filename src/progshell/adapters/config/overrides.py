"""Parse and merge ``--set SECTION.KEY=VALUE`` overrides into a Config."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    The first ``=`` separates the dotted path from the value; the first dot
    separates the section from the key path.

    Raises:
        ValueError: If ``=`` is missing, the key has no dot, or a path
            component is empty.

    Examples:
        >>> override = parse_override("progshell.timeout_seconds=2.5")
        >>> override.section, override.key_path, override.value
        ('progshell', ('timeout_seconds',), 2.5)

        >>> parse_override("lib_log_rich.console_level=DEBUG").value
        'DEBUG'
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw string with JSON parsing, falling back to the string.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into the nested dict handed to ``Config.with_overrides``.

    Raises:
        TypeError: If the key path descends into a value set by an earlier
            override that is not a table.

    Examples:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="s", key_path=("x", "y"), value=3))
        >>> d
        {'s': {'x': {'y': 3}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def validate_overrides(raw_overrides: Iterable[str]) -> dict[str, dict[str, object]]:
    """Parse and nest every override, raising on the first malformed one.

    Conflicting paths, where one override sets a scalar and a later one
    descends into it, are malformed input too.

    Raises:
        ValueError: If an override is malformed or conflicts with an earlier one.

    Example:
        >>> validate_overrides(["a.b=1", "c.d=x"])
        {'a': {'b': 1}, 'c': {'d': 'x'}}
        >>> validate_overrides(["a.b=1", "a.b.c=2"])
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'a.b.c=2': Expected dict at key 'b', got int
    """
    nested: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        try:
            _nest_override(nested, parse_override(raw))
        except TypeError as exc:
            raise ValueError(f"Invalid override {raw!r}: {exc}") from exc
    return nested


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge overrides into ``config``.

    Returns:
        A new Config, or ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If an override is malformed or conflicts with an earlier one.

    Examples:
        >>> cfg = Config({"s": {"k": 1}}, {"s.k": {"layer": "default", "path": None, "key": "s.k"}})
        >>> apply_overrides(cfg, ("s.k=2",))["s"]["k"]
        2
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    return config.with_overrides(validate_overrides(raw_overrides))


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
    "validate_overrides",
]
