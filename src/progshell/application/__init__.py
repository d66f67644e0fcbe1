"""Application layer - dependency container, dispatch and port definitions.

Contents:
    * :mod:`.ports` - Protocols for adapters, runners and the exit strategy
    * :mod:`.container` - Capability-keyed dependency container
    * :mod:`.dispatch` - Runner invocation with injected capabilities
    * :mod:`.lifecycle` - Invocation state machine
"""

from __future__ import annotations

from .container import CORE_CAPABILITIES, Container, build_container, capability_for
from .dispatch import dispatch, injected_arguments
from .lifecycle import Invocation
from .ports import ExitStrategy, GetConfig, GetLogger, InitLogging, Runner

__all__ = [
    "CORE_CAPABILITIES",
    "Container",
    "ExitStrategy",
    "GetConfig",
    "GetLogger",
    "InitLogging",
    "Invocation",
    "Runner",
    "build_container",
    "capability_for",
    "dispatch",
    "injected_arguments",
]
