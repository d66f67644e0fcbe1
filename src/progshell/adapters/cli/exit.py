"""Process exit strategy used outside of tests."""

from __future__ import annotations

import sys
from typing import NoReturn


class ProcessExit:
    """Terminate the interpreter through :func:`sys.exit`.

    ``SystemExit`` unwinds the stack, so ``finally`` blocks in the driver
    still restore traceback flags and shut logging down.

    Example:
        >>> ProcessExit().exit(3)
        Traceback (most recent call last):
        ...
        SystemExit: 3
    """

    __slots__ = ()

    def exit(self, code: int) -> NoReturn:
        sys.exit(code)


__all__ = ["ProcessExit"]
