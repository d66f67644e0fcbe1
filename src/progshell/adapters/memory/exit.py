"""Recording exit strategy for tests.

Contents:
    * :class:`RecordingExit` - captures requested exit codes instead of exiting.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _empty_codes() -> list[int]:
    """Create an empty typed list for recorded exit codes."""
    return []


@dataclass
class RecordingExit:
    """Captures exit requests for test assertions.

    Each test should create its own instance; nothing is shared between
    tests, so there is no global state to restore.

    Attributes:
        codes: Every code passed to :meth:`exit`, in order.

    Example:
        >>> recorder = RecordingExit()
        >>> recorder.exit(0)
        >>> recorder.codes, recorder.code
        ([0], 0)
    """

    codes: list[int] = field(default_factory=_empty_codes)

    def exit(self, code: int) -> None:
        """Record ``code`` and return without terminating."""
        self.codes.append(code)

    @property
    def called(self) -> bool:
        return bool(self.codes)

    @property
    def code(self) -> int:
        """The single recorded exit code.

        Raises:
            AssertionError: Unless exactly one exit was requested.
        """
        if len(self.codes) != 1:
            raise AssertionError(f"Expected exactly one exit request, got {self.codes}")
        return self.codes[0]


__all__ = ["RecordingExit"]
