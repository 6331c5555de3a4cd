"""Exception hierarchy for bump-py.

Every error raised on purpose by bump-py derives from :class:`BumpPyError`,
so the command layer can report them uniformly. Only git and configuration
errors are fatal; :class:`CommitParseError` is recovered while scanning
history because most repositories contain non-conventional commits.
"""

from __future__ import annotations


class BumpPyError(Exception):
    """Base class for all bump-py errors."""

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n{self.details}"
        return self.message


# Git


class GitError(BumpPyError):
    """A git command failed (tag lookup or revision walk)."""

    def __init__(self, message: str, *, stderr: str | None = None) -> None:
        super().__init__(message, details=stderr.strip() if stderr else None)
        self.stderr = stderr


class NotARepositoryError(GitError):
    """The given path is not inside a git work tree."""


# Commits


class CommitParseError(BumpPyError):
    """A commit header does not follow the conventional commit grammar."""


# Configuration


class ConfigError(BumpPyError):
    """Configuration could not be read."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


# Versions


class VersionError(BumpPyError):
    """A string is not a valid semantic version."""
