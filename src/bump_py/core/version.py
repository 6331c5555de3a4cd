"""Semantic version model and increment rules.

Versions are immutable: every increment returns a new :class:`Version`.
Parsing, rendering and precedence are delegated to the ``semver`` package
so that the ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` rules are exactly
those of semver.org.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

import semver

from bump_py.exceptions import VersionError


class BumpLabel(Enum):
    """Kind of increment applied to a version."""

    MAJOR = "major"
    """Bump the major field (1.4.2 -> 2.0.0)."""

    MINOR = "minor"
    """Bump the minor field (1.4.2 -> 1.5.0)."""

    PATCH = "patch"
    """Bump the patch field (1.4.2 -> 1.4.3)."""

    RELEASE = "release"
    """Drop prerelease and build metadata only (1.5.0-rc.1 -> 1.5.0)."""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Version:
    """A semantic version.

    Equality compares every field including build metadata; ordering
    follows semver precedence, which ignores build metadata.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise VersionError(f"Version fields must be non-negative: {self._as_semver_args()}")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string such as ``1.2.3-rc.1+build.5``.

        Args:
            text: Version string without any tag prefix

        Returns:
            Parsed version

        Raises:
            VersionError: If the string is not a valid semantic version
        """
        try:
            sv = semver.Version.parse(text.strip())
        except (ValueError, TypeError) as e:
            raise VersionError(f"Invalid semantic version: {text!r}") from e
        return cls(sv.major, sv.minor, sv.patch, sv.prerelease, sv.build)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def increment_major(self) -> Version:
        return Version(self.major + 1, 0, 0)

    def increment_minor(self) -> Version:
        return Version(self.major, self.minor + 1, 0)

    def increment_patch(self) -> Version:
        return Version(self.major, self.minor, self.patch + 1)

    def release(self) -> Version:
        """Strip prerelease and build metadata, keeping the numbers."""
        return replace(self, prerelease=None, build=None)

    def bump(self, label: BumpLabel) -> Version:
        """Apply the increment named by ``label``."""
        if label is BumpLabel.MAJOR:
            return self.increment_major()
        if label is BumpLabel.MINOR:
            return self.increment_minor()
        if label is BumpLabel.PATCH:
            return self.increment_patch()
        return self.release()

    def _as_semver_args(self) -> tuple[int, int, int, str | None, str | None]:
        return (self.major, self.minor, self.patch, self.prerelease, self.build)

    def _to_semver(self) -> semver.Version:
        return semver.Version(*self._as_semver_args())

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 by semver precedence, ignoring build metadata."""
        return self._to_semver().compare(other._to_semver())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return str(self._to_semver())


def parse_version(text: str) -> Version:
    """Shorthand for :meth:`Version.parse`."""
    return Version.parse(text)
