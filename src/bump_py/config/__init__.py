"""Configuration management for bump-py."""

from __future__ import annotations

from bump_py.config.loader import load_config
from bump_py.config.models import BumpPyConfig, CommitsConfig

__all__ = [
    "BumpPyConfig",
    "CommitsConfig",
    "load_config",
]
