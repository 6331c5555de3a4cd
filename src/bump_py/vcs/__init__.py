"""Version control access for bump-py."""

from __future__ import annotations

from bump_py.vcs.git import GitRepository, VersionAndTag

__all__ = ["GitRepository", "VersionAndTag"]
