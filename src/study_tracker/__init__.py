"""Study Tracker application package."""

from __future__ import annotations

__all__ = ["main"]


def main() -> None:
    import sys

    from .cli import main as cli_main

    sys.exit(cli_main())
