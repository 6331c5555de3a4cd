"""Bump decision engine.

Turns the last tagged version, the commits since that tag and the manual
flags given on the command line into the next version and its label.

Bump rules follow semver.org:

- ``fix`` commits are PATCH releases.
- ``feat`` commits are MINOR releases.
- Breaking commits (``!`` or a ``BREAKING CHANGE`` footer) are MAJOR releases.

While the project is in major version zero (0.y.z) every signal drops one
level: breaking commits are MINOR releases and ``feat`` commits are PATCH
releases.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bump_py.core.commits import CommitType, parse_commits
from bump_py.core.version import BumpLabel, Version

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bump_py.core.commits import CommitParser
    from bump_py.vcs.git import VersionAndTag

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_VERSION = Version(0, 1, 0)


@dataclass(frozen=True)
class BumpRequest:
    """Manual flags controlling the bump.

    ``major``, ``minor`` and ``patch`` force an increment; ``bump`` asks for
    the increment to be derived from the commit history.
    """

    major: bool = False
    minor: bool = False
    patch: bool = False
    bump: bool = False


@dataclass(frozen=True)
class BumpResult:
    """Outcome of :func:`resolve_bump`."""

    version: Version
    label: BumpLabel
    previous: Version | None = None
    tag: str | None = None

    @property
    def is_initial(self) -> bool:
        """True when no tagged version existed before."""
        return self.previous is None


def scan_commits(
    messages: Iterable[str],
    parser: CommitParser,
    *,
    major_version_zero: bool,
) -> BumpLabel:
    """Classify a range of commits into a single bump label.

    Messages are consumed lazily and the scan stops at the first breaking
    commit. Messages that are not conventional commits are skipped.

    Args:
        messages: Raw commit messages, in any order
        parser: Conventional commit parser
        major_version_zero: Whether the starting version is 0.y.z

    Returns:
        The strongest label found, or ``RELEASE`` when no commit carries a
        bump signal
    """
    major = minor = patch = False

    for commit in parse_commits(messages, parser):
        if commit.breaking:
            if major_version_zero:
                minor = True
            else:
                major = True
            logger.debug("Breaking change found, stopping scan: %s", commit.description)
            break

        match commit.commit_type, major_version_zero:
            case CommitType.FEAT, True:
                patch = True
            case CommitType.FEAT, False:
                minor = True
            case CommitType.FIX, _:
                patch = True
            case _:
                # no bump impact
                pass

    if major:
        return BumpLabel.MAJOR
    if minor:
        return BumpLabel.MINOR
    if patch:
        return BumpLabel.PATCH
    return BumpLabel.RELEASE


def resolve_bump(
    last: VersionAndTag | None,
    messages: Iterable[str],
    request: BumpRequest,
    parser: CommitParser,
    *,
    initial_version: Version = DEFAULT_INITIAL_VERSION,
) -> BumpResult:
    """Compute the next version.

    Rules are checked in order and the first one that applies wins:

    1. No tagged version yet: ``initial_version``.
    2. ``major`` / ``minor`` / ``patch`` flag: that increment, history ignored.
    3. ``bump`` on a prerelease: release it without scanning history.
    4. ``bump``: increment derived from ``messages``.
    5. No flag: the last version, unchanged.

    Args:
        last: Last tagged version, or None when the repository has no tag
        messages: Raw commit messages since ``last``; only iterated by rule 4
        request: Manual flags
        parser: Conventional commit parser
        initial_version: Version used when there is no tag

    Returns:
        The new version with its label

    Raises:
        GitError: If enumerating ``messages`` fails
    """
    if last is None:
        logger.info("No tagged version found, using %s", initial_version)
        return BumpResult(initial_version, BumpLabel.RELEASE)

    current = last.version

    def result(label: BumpLabel) -> BumpResult:
        return BumpResult(current.bump(label), label, previous=current, tag=last.tag)

    if request.major:
        return result(BumpLabel.MAJOR)
    if request.minor:
        return result(BumpLabel.MINOR)
    if request.patch:
        return result(BumpLabel.PATCH)
    if request.bump and current.is_prerelease:
        logger.info("Releasing pending prerelease %s", current)
        return result(BumpLabel.RELEASE)
    if request.bump:
        label = scan_commits(messages, parser, major_version_zero=current.major == 0)
        logger.info("Commits since %s require a %s bump", last.tag, label)
        if label is BumpLabel.RELEASE:
            # nothing releasable: keep the tagged version as is
            return BumpResult(current, label, previous=current, tag=last.tag)
        return result(label)

    return BumpResult(current, BumpLabel.RELEASE, previous=current, tag=last.tag)
