"""Public package surface exposing options, container, dispatch and metadata.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Options, capabilities, cancellation, errors
- Application exports: dependency container and runner dispatch
- Composition exports: Wired adapter services
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import Container, build_container, dispatch

# Composition exports (wired adapters)
from .composition import AppServices, build_production, build_testing

# Domain exports
from .domain import (
    CancellationToken,
    Capability,
    Options,
    ParseError,
    RunnerError,
)

__all__ = [
    "AppServices",
    "CancellationToken",
    "Capability",
    "Container",
    "Options",
    "ParseError",
    "RunnerError",
    "build_container",
    "build_production",
    "build_testing",
    "dispatch",
    "print_info",
]
