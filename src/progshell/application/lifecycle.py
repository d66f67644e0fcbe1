"""Invocation lifecycle: ``UNPARSED -> PARSED -> RUNNING -> SUCCEEDED|FAILED``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from ..domain.enums import RunState

_TRANSITIONS: Final[dict[RunState, frozenset[RunState]]] = {
    RunState.UNPARSED: frozenset({RunState.PARSED, RunState.SHORT_CIRCUITED, RunState.FAILED}),
    RunState.PARSED: frozenset({RunState.RUNNING, RunState.FAILED}),
    RunState.RUNNING: frozenset({RunState.SUCCEEDED, RunState.FAILED}),
    RunState.SHORT_CIRCUITED: frozenset(),
    RunState.SUCCEEDED: frozenset(),
    RunState.FAILED: frozenset(),
}


def _initial_history() -> list[RunState]:
    return [RunState.UNPARSED]


@dataclass(slots=True)
class Invocation:
    """Tracks the state of one parse-and-run cycle.

    Attributes:
        history: Every state entered, oldest first.

    Example:
        >>> invocation = Invocation()
        >>> invocation.advance(RunState.PARSED)
        >>> invocation.advance(RunState.RUNNING)
        >>> invocation.advance(RunState.SUCCEEDED)
        >>> invocation.state, invocation.ran
        (<RunState.SUCCEEDED: 'succeeded'>, True)
        >>> invocation.advance(RunState.RUNNING)
        Traceback (most recent call last):
        ...
        RuntimeError: Illegal transition succeeded -> running
    """

    history: list[RunState] = field(default_factory=_initial_history)

    @property
    def state(self) -> RunState:
        return self.history[-1]

    @property
    def ran(self) -> bool:
        """Whether the runner was entered during this invocation."""
        return RunState.RUNNING in self.history

    def advance(self, target: RunState) -> None:
        """Move to ``target``, rejecting transitions the lifecycle forbids."""
        if target not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal transition {self.state.value} -> {target.value}")
        self.history.append(target)


__all__ = ["Invocation"]
