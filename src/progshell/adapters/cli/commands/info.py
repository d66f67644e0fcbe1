"""Runner printing package metadata."""

from __future__ import annotations

import logging
from typing import ClassVar

from progshell import __init__conf__
from progshell.domain.enums import Capability


class InfoRunner:
    """Print resolved metadata so users can inspect installation details.

    Example:
        >>> InfoRunner().run(logger=logging.getLogger("doc"))  # doctest: +ELLIPSIS
        Info for progshell:
        ...
    """

    name: ClassVar[str] = "info"
    requires: ClassVar[frozenset[Capability]] = frozenset({Capability.LOGGER})

    def run(self, *, logger: logging.Logger) -> None:
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["InfoRunner"]
