"""Module entry point for ``python -m progshell``."""

from __future__ import annotations

from .adapters.cli.main import main
from .composition import build_production

if __name__ == "__main__":
    main(services_factory=build_production)
