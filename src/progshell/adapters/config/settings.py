"""Typed view of the ``[progshell]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field

from progshell import __init__conf__
from progshell.domain.cancellation import CancellationToken


class RuntimeSettingsModel(BaseModel):
    """Pydantic model for the ``[progshell]`` section.

    Example:
        >>> RuntimeSettingsModel().timeout_seconds
        0.0
        >>> RuntimeSettingsModel(timeout_seconds=1.5).deadline_seconds
        1.5
        >>> RuntimeSettingsModel(timeout_seconds=0).deadline_seconds is None
        True
    """

    timeout_seconds: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(extra="ignore")

    @property
    def deadline_seconds(self) -> float | None:
        """Timeout for the cancellation token; ``None`` when disabled."""
        return self.timeout_seconds or None


def load_runtime_settings(config: Config) -> RuntimeSettingsModel:
    """Validate the package section of ``config``.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.

    Example:
        >>> load_runtime_settings(Config({"progshell": {"timeout_seconds": 3}}, {})).timeout_seconds
        3.0
    """
    raw: object = config.get(__init__conf__.name, default={})
    return RuntimeSettingsModel.model_validate(cast("dict[str, object]", raw) if raw else {})


def build_cancellation_token(config: Config) -> CancellationToken:
    """Create the invocation's cancellation token from configuration.

    Example:
        >>> build_cancellation_token(Config({}, {})).deadline is None
        True
    """
    return CancellationToken.with_timeout(load_runtime_settings(config).deadline_seconds)


__all__ = [
    "RuntimeSettingsModel",
    "build_cancellation_token",
    "load_runtime_settings",
]
