"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import Capability


class ParseError(ValueError):
    """Malformed command-line input.

    Raised by the parser for unknown flags, unexpected arguments, unknown
    commands, or option values that fail validation. The driver shows the
    message to the user and exits with code 1 without running anything.

    Example:
        >>> err = ParseError("No such option: --bogus-flag")
        >>> str(err)
        'No such option: --bogus-flag'
        >>> isinstance(err, ValueError)
        True
    """


class RunnerError(Exception):
    """Failure reported by a runner during execution.

    The driver logs these at error severity through the injected logger and
    exits with code 1.

    Example:
        >>> str(RunnerError("disk full"))
        'disk full'
    """


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent wiring of the dependency container.

    These are programming defects detected before any runner executes.

    Example:
        >>> str(ConfigurationError("logger bound before cancellation"))
        'logger bound before cancellation'
    """


class MissingCapabilityError(ConfigurationError):
    """One or more capabilities required by a runner are not bound.

    Example:
        >>> from progshell.domain.enums import Capability
        >>> err = MissingCapabilityError([Capability.LOGGER])
        >>> str(err)
        'Unresolved capabilities: logger'
        >>> err.missing
        (<Capability.LOGGER: 'logger'>,)
    """

    def __init__(self, missing: Iterable[Capability]) -> None:
        self.missing: tuple[Capability, ...] = tuple(sorted(missing, key=lambda cap: cap.order))
        names = ", ".join(cap.value for cap in self.missing)
        super().__init__(f"Unresolved capabilities: {names}")


class CancelledError(Exception):
    """Work was abandoned because its cancellation token fired.

    Example:
        >>> str(CancelledError("deadline exceeded"))
        'deadline exceeded'
    """


__all__ = [
    "CancelledError",
    "ConfigurationError",
    "MissingCapabilityError",
    "ParseError",
    "RunnerError",
]
