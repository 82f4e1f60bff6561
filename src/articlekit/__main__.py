"""CLI entry point for articlekit."""

from __future__ import annotations

from articlekit.cli import main

if __name__ == "__main__":
    main()
