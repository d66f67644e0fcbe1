"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Runners
from ..adapters.cli.commands import builtin_runners

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import get_logger, init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import GetConfig, GetLogger, InitLogging, Runner

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_get_logger: GetLogger = get_logger


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    get_logger: GetLogger
    runners: Mapping[str, Runner]


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        get_logger=get_logger,
        runners=builtin_runners(),
    )


def build_testing(
    *,
    runners: Mapping[str, Runner] | None = None,
    get_logger_override: GetLogger | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        runners: Runner registry replacing the built-in one. Pass spies to
            observe whether and how a runner was invoked.
        get_logger_override: Logger factory replacing the package logger.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import get_config_in_memory, init_logging_in_memory

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        get_logger=get_logger_override if get_logger_override is not None else get_logger,
        runners=runners if runners is not None else builtin_runners(),
    )


__all__ = [
    # Configuration
    "get_config",
    # Logging
    "get_logger",
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
