"""Application ports - Protocol definitions for adapters and runners.

Each Protocol describes a seam the composition root fills in. Module-level
adapter functions satisfy the callable protocols via structural subtyping
(PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that layer contracts remain
    satisfied at runtime.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import Capability

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class GetLogger(Protocol):
    """Return the logger bound into the dependency container."""

    def __call__(self) -> logging.Logger: ...


class ExitStrategy(Protocol):
    """Terminate the process with an exit code.

    The production implementation never returns. Test doubles record the
    code and return, so callers must not rely on ``exit`` raising.
    """

    def exit(self, code: int) -> None: ...


class Runner(Protocol):
    """Single execution entry point selected by the parsed options.

    Attributes:
        name: Command name under which the runner is registered.
        requires: Capabilities injected into :meth:`run` as keyword
            arguments named after :attr:`Capability.keyword`.
    """

    name: str
    requires: frozenset[Capability]

    def run(self, **injected: Any) -> None:
        """Do the work; raise :class:`~progshell.domain.errors.RunnerError` on failure."""
        ...


__all__ = [
    "ExitStrategy",
    "GetConfig",
    "GetLogger",
    "InitLogging",
    "Runner",
]
