"""Type-safe domain enums for dependency capabilities and run lifecycle."""

from __future__ import annotations

from enum import Enum


class Capability(str, Enum):
    """Dependency capabilities a runner can declare and receive.

    Members are listed in binding order: the cancellation token comes first,
    the logger second, and the parsed options last. The value doubles as
    the keyword argument name used for injection.

    Attributes:
        CANCELLATION: Cancellation token threaded through the invocation.
        LOGGER: Logger used for user-visible diagnostics.
        OPTIONS: Parsed command-line options.

    Example:
        >>> Capability.LOGGER.keyword
        'logger'
        >>> [cap.order for cap in Capability]
        [0, 1, 2]
        >>> Capability.OPTIONS == "options"
        True
    """

    CANCELLATION = "token"
    LOGGER = "logger"
    OPTIONS = "options"

    @property
    def keyword(self) -> str:
        """Keyword argument name used when injecting into ``Runner.run``."""
        return self.value

    @property
    def order(self) -> int:
        """Position of this capability in the binding sequence."""
        return list(Capability).index(self)


class RunState(str, Enum):
    """Lifecycle states of a single CLI invocation.

    Attributes:
        UNPARSED: Arguments not yet parsed.
        PARSED: Options available; container not yet dispatched.
        SHORT_CIRCUITED: Parsing handled the request itself (version, help).
        RUNNING: The runner is executing.
        SUCCEEDED: The runner completed without error.
        FAILED: Parsing or the runner failed.

    Example:
        >>> RunState.SUCCEEDED.is_terminal
        True
        >>> RunState.PARSED.is_terminal
        False
    """

    UNPARSED = "unparsed"
    PARSED = "parsed"
    SHORT_CIRCUITED = "short_circuited"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is allowed."""
        return self in (RunState.SHORT_CIRCUITED, RunState.SUCCEEDED, RunState.FAILED)


__all__ = [
    "Capability",
    "RunState",
]
