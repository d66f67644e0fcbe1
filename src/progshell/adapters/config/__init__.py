"""Configuration adapter - loading, overrides and typed settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - ``[progshell]`` section model and token factory
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile
from .overrides import apply_overrides, validate_overrides
from .settings import RuntimeSettingsModel, build_cancellation_token, load_runtime_settings

__all__ = [
    "RuntimeSettingsModel",
    "apply_overrides",
    "build_cancellation_token",
    "get_config",
    "get_default_config_path",
    "load_runtime_settings",
    "validate_overrides",
    "validate_profile",
]
