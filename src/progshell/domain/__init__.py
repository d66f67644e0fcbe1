"""Domain layer - pure types with no I/O or framework dependencies.

Contains the option model, capability and lifecycle enums, the cancellation
token and the exception hierarchy.

Contents:
    * :mod:`.options` - Immutable parsed options
    * :mod:`.enums` - Domain enumerations (Capability, RunState)
    * :mod:`.cancellation` - Cooperative cancellation token
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .cancellation import CancellationToken
from .enums import Capability, RunState
from .errors import (
    CancelledError,
    ConfigurationError,
    MissingCapabilityError,
    ParseError,
    RunnerError,
)
from .options import DEFAULT_COMMAND, Options

__all__ = [
    # Options
    "DEFAULT_COMMAND",
    "Options",
    # Cancellation
    "CancellationToken",
    # Enums
    "Capability",
    "RunState",
    # Errors
    "CancelledError",
    "ConfigurationError",
    "MissingCapabilityError",
    "ParseError",
    "RunnerError",
]
