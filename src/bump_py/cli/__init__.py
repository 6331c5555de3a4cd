"""Command-line interface for bump-py."""

from __future__ import annotations

from bump_py.cli.app import app, main

__all__ = ["app", "main"]
