"""Layered configuration for one progshell invocation.

Contents:
    * :func:`validate_profile` - reject unsafe ``--profile`` names while parsing.
    * :func:`get_config` - merged configuration, cached per profile.
    * :func:`get_default_config_path` - bundled defaults shipped with the package.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config, validate_profile_name

from progshell import __init__conf__

_DEFAULT_CONFIG = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Raise :class:`ValueError` unless ``profile`` is safe to use in config paths.

    Examples:
        >>> validate_profile("staging")
        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` (the lowest layer).

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None) -> Config:
    """Merge the bundled defaults with app, host, user, dotenv and env layers.

    A profile reads ``profile/<name>/`` below every configuration directory.
    Results are cached per profile; tests call ``get_config.cache_clear()``.

    Raises:
        ValueError: If ``profile`` is not a safe profile name.

    Example:
        >>> isinstance(get_config(), Config)
        True
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
