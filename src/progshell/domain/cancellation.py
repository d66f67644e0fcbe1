"""Cancellation token passed explicitly to runners that need it."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .errors import CancelledError

Clock = Callable[[], float]


@dataclass(slots=True)
class CancellationToken:
    """Cooperative cancellation signal with an optional deadline.

    A runner polls :attr:`cancelled` or calls :meth:`raise_if_cancelled` at
    points where stopping is safe. The token is cancelled either explicitly
    through :meth:`cancel` or implicitly once the monotonic deadline passes.

    Attributes:
        deadline: Monotonic timestamp after which the token reports
            cancellation, or ``None`` for no deadline.
        clock: Monotonic clock, replaceable in tests.

    Example:
        >>> token = CancellationToken()
        >>> token.cancelled
        False
        >>> token.cancel("user abort")
        >>> token.cancelled, token.reason
        (True, 'user abort')
    """

    deadline: float | None = None
    clock: Clock = field(default=time.monotonic, repr=False)
    _reason: str | None = field(default=None, init=False, repr=False)

    @classmethod
    def with_timeout(cls, seconds: float | None, *, clock: Clock = time.monotonic) -> CancellationToken:
        """Create a token that cancels itself ``seconds`` from now.

        Args:
            seconds: Timeout in seconds. ``None`` means no deadline.
            clock: Monotonic clock used both now and for later checks.

        Raises:
            ValueError: If ``seconds`` is negative.

        Example:
            >>> CancellationToken.with_timeout(None).deadline is None
            True
            >>> CancellationToken.with_timeout(0, clock=lambda: 5.0).cancelled
            True
        """
        if seconds is None:
            return cls(clock=clock)
        if seconds < 0:
            raise ValueError(f"timeout must not be negative, got {seconds}")
        return cls(deadline=clock() + seconds, clock=clock)

    def cancel(self, reason: str = "cancelled") -> None:
        """Cancel the token. The first reason wins."""
        if self._reason is None:
            self._reason = reason

    @property
    def cancelled(self) -> bool:
        """Whether the token was cancelled or its deadline has passed."""
        if self._reason is not None:
            return True
        if self.deadline is not None and self.clock() >= self.deadline:
            self._reason = "deadline exceeded"
            return True
        return False

    @property
    def reason(self) -> str | None:
        """Why the token was cancelled, or ``None`` while still active."""
        return self._reason if self.cancelled else None

    @property
    def remaining(self) -> float | None:
        """Seconds left until the deadline, clamped at zero."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - self.clock())

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` when the token is cancelled.

        Example:
            >>> token = CancellationToken()
            >>> token.raise_if_cancelled()
            >>> token.cancel("stop")
            >>> token.raise_if_cancelled()
            Traceback (most recent call last):
            ...
            progshell.domain.errors.CancelledError: stop
        """
        if self.cancelled:
            raise CancelledError(self._reason)


__all__ = ["CancellationToken", "Clock"]
