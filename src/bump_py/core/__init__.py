"""Core business logic for bump-py.

This module contains the fundamental building blocks:
- Semantic version model and increment rules
- Conventional commit parsing
- Bump decision from commit history and manual flags
"""

from __future__ import annotations

from bump_py.core.bump import BumpRequest, BumpResult, resolve_bump, scan_commits
from bump_py.core.commits import (
    CommitParser,
    CommitType,
    ParsedCommit,
    parse_commit,
    parse_commits,
)
from bump_py.core.version import BumpLabel, Version, parse_version

__all__ = [
    # Version
    "BumpLabel",
    # Bump
    "BumpRequest",
    "BumpResult",
    # Commits
    "CommitParser",
    "CommitType",
    "ParsedCommit",
    "Version",
    "parse_commit",
    "parse_commits",
    "parse_version",
    "resolve_bump",
    "scan_commits",
]
