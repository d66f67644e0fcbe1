"""Immutable option model produced by the command-line parser."""

from __future__ import annotations

from dataclasses import dataclass

#: Runner executed when no command is given on the command line.
DEFAULT_COMMAND = "run"

#: Console log levels selected by ``--debug`` and ``--quiet``.
DEBUG_CONSOLE_LEVEL = "DEBUG"
QUIET_CONSOLE_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Options:
    """Parsed command-line configuration for one invocation.

    The version flag is absent: it is answered while parsing
    and never reaches an :class:`Options` instance.

    Attributes:
        command: Name of the runner to execute.
        traceback: Show full tracebacks for unexpected errors.
        profile: Optional configuration profile name.
        set_overrides: Raw ``SECTION.KEY=VALUE`` configuration overrides.
        debug: Lower the console log level to DEBUG.
        quiet: Raise the console log level to WARNING.

    Example:
        >>> options = Options()
        >>> options.command
        'run'
        >>> Options(debug=True).effective_overrides()
        ('lib_log_rich.console_level=DEBUG',)
    """

    command: str = DEFAULT_COMMAND
    traceback: bool = False
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    debug: bool = False
    quiet: bool = False

    @property
    def console_level(self) -> str | None:
        """Console log level requested by ``--debug``/``--quiet``, if any."""
        if self.debug:
            return DEBUG_CONSOLE_LEVEL
        if self.quiet:
            return QUIET_CONSOLE_LEVEL
        return None

    def effective_overrides(self) -> tuple[str, ...]:
        """Return ``--set`` overrides followed by those implied by log flags.

        Flag-derived overrides come last so they win over an explicit
        ``--set lib_log_rich.console_level=...``.

        Example:
            >>> Options(set_overrides=("a.b=1",), quiet=True).effective_overrides()
            ('a.b=1', 'lib_log_rich.console_level=WARNING')
        """
        level = self.console_level
        if level is None:
            return self.set_overrides
        return (*self.set_overrides, f"lib_log_rich.console_level={level}")


__all__ = [
    "DEBUG_CONSOLE_LEVEL",
    "DEFAULT_COMMAND",
    "QUIET_CONSOLE_LEVEL",
    "Options",
]
