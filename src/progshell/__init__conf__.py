"""Static package metadata surfaced to CLI commands and documentation.

Contents:
    * Identity constants (:data:`name`, :data:`title`, :data:`version`, ...).
    * Layered configuration identifiers (``LAYEREDCONF_*``).
    * :func:`print_info` - render the metadata block for the ``info`` command.

Note:
    Release builds stamp :data:`version`; development checkouts report
    ``unknown``.
"""

from __future__ import annotations

name = "progshell"
title = "Bootstrap shell that parses options, injects dependencies and runs a single command"
version = "unknown"
homepage = "https://github.com/progshell/progshell"
author = "progshell maintainers"
author_email = "maintainers@progshell.invalid"
shell_command = "progshell"

#: Vendor, application and slug used by lib_layered_config for path discovery.
LAYEREDCONF_VENDOR: str = "progshell"
LAYEREDCONF_APP: str = "progshell"
LAYEREDCONF_SLUG: str = "progshell"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for progshell:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
