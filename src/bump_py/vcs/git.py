"""Git operations via subprocess.

Only the two queries the bump engine needs are exposed: the last tagged
version reachable from a revision, and the messages of the commits in a
range. Every git failure is raised as :class:`GitError` with git's stderr.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING, cast

from bump_py.core.version import Version
from bump_py.exceptions import GitError, NotARepositoryError, VersionError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_READ_SIZE = 8192


@dataclass(frozen=True)
class VersionAndTag:
    """A version together with the tag it was read from."""

    tag: str
    version: Version


def _outranks(tag: str, version: Version, best: VersionAndTag) -> bool:
    """Higher precedence wins; equal precedence falls back to the tag name."""
    order = version.compare(best.version)
    return order > 0 or (order == 0 and tag > best.tag)


class GitRepository:
    """A git work tree.

    Args:
        path: Any path inside the work tree

    Raises:
        NotARepositoryError: If ``path`` is not inside a git work tree
    """

    def __init__(self, path: Path | str = ".") -> None:
        path = Path(path)
        if not path.is_dir():
            raise NotARepositoryError(f"Not a directory: {path}")
        try:
            toplevel = self._git(["rev-parse", "--show-toplevel"], cwd=path)
        except GitError as e:
            raise NotARepositoryError(f"Not a git repository: {path}", stderr=e.stderr) from e
        self.path = Path(toplevel)

    def _run(self, args: list[str]) -> str:
        return self._git(args, cwd=self.path)

    @staticmethod
    def _git(args: list[str], cwd: Path) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=cwd,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout.strip()

    def list_tags(self, rev: str = "HEAD", prefix: str = "") -> list[str]:
        """List tags reachable from ``rev`` whose name starts with ``prefix``."""
        output = self._run(["tag", "--merged", rev, "--list", f"{prefix}*"])
        return [line.strip() for line in output.splitlines() if line.strip()]

    def find_last_version(self, rev: str = "HEAD", prefix: str = "v") -> VersionAndTag | None:
        """Find the highest version tagged in the history of ``rev``.

        Args:
            rev: Revision whose history is searched
            prefix: Tag prefix stripped before parsing (e.g. ``v`` in ``v1.2.0``)

        Returns:
            The highest version and its tag, or None if no tag parses as a version

        Raises:
            GitError: If ``rev`` is unknown or git fails
        """
        best: VersionAndTag | None = None
        for tag in self.list_tags(rev, prefix):
            try:
                version = Version.parse(tag.removeprefix(prefix))
            except VersionError:
                logger.debug("Ignoring tag %s: not a version", tag)
                continue
            if best is None or _outranks(tag, version, best):
                best = VersionAndTag(tag, version)

        if best is not None:
            logger.debug("Last version under %s: %s (tag %s)", rev, best.version, best.tag)
        return best

    def iter_commit_messages(self, from_tag: str | None, to_rev: str = "HEAD") -> Iterator[str]:
        """Stream raw commit messages of ``from_tag..to_rev``, newest first.

        Messages are read from git as they are produced; closing the iterator
        early stops the git process.

        Args:
            from_tag: Excluded lower bound, or None for the whole history
            to_rev: Included upper bound

        Yields:
            Raw commit messages

        Raises:
            GitError: If the range is invalid or git fails
        """
        rev_range = f"{from_tag}..{to_rev}" if from_tag else to_rev
        args = ["git", "log", "-z", "--format=%B", rev_range, "--"]
        try:
            proc = subprocess.Popen(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e

        stdout = cast("IO[str]", proc.stdout)
        finished = False
        try:
            buffer = ""
            while chunk := stdout.read(_READ_SIZE):
                buffer += chunk
                *records, buffer = buffer.split("\0")
                for record in records:
                    yield record.strip("\n")
            if buffer.strip("\n"):
                yield buffer.strip("\n")
            finished = True
        finally:
            if not finished:
                proc.kill()
            _, stderr = proc.communicate()
            if finished and proc.returncode != 0:
                raise GitError(
                    f"git log {rev_range} failed with exit code {proc.returncode}",
                    stderr=stderr,
                )
