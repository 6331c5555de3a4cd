"""Conventional commit parsing.

Parses commit messages following the Conventional Commits specification:
https://www.conventionalcommits.org/

Format: <type>[optional scope][!]: <description>

    [optional body]

    [optional footer(s)]

Only ``feat`` and ``fix`` influence the version; the remaining types are
recognized so they can be reported, but they carry no bump weight.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from bump_py.exceptions import CommitParseError, ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_BREAKING_PATTERN = r"^BREAKING[ -]CHANGE:"

HEADER_PATTERN = re.compile(
    r"^(?P<type>[a-z][a-z0-9_-]*)"
    r"(?:\((?P<scope>[^()\r\n]+)\))?"
    r"(?P<breaking>!)?"
    r": (?P<description>\S.*)$",
    re.IGNORECASE,
)


class CommitType(Enum):
    """Conventional commit types.

    Tokens outside this set are kept as :attr:`OTHER`, so merge commits and
    team-specific types never abort a history scan.
    """

    FEAT = "feat"
    FIX = "fix"
    BUILD = "build"
    CHORE = "chore"
    CI = "ci"
    DOCS = "docs"
    PERF = "perf"
    REFACTOR = "refactor"
    REVERT = "revert"
    STYLE = "style"
    TEST = "test"
    OTHER = "other"

    @classmethod
    def from_token(cls, token: str) -> CommitType:
        try:
            return cls(token.lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class ParsedCommit:
    """A commit message parsed as a conventional commit."""

    commit_type: CommitType
    scope: str | None
    breaking: bool
    description: str
    raw_type: str = ""
    body: str = ""


class CommitParser:
    """Parser for conventional commit messages.

    Args:
        scope_regex: When set, a scope present in the header must fully match
            this pattern or the commit is rejected
        breaking_pattern: Pattern searched line by line in the body to detect
            a breaking-change footer

    Raises:
        ConfigValidationError: If either pattern is not a valid regex
    """

    def __init__(
        self,
        scope_regex: str | None = None,
        breaking_pattern: str = DEFAULT_BREAKING_PATTERN,
    ) -> None:
        self.scope_regex = scope_regex
        self.breaking_pattern = breaking_pattern
        self._scope_re = _compile("scope_regex", scope_regex) if scope_regex else None
        self._breaking_re = _compile("breaking_pattern", breaking_pattern, re.MULTILINE)

    def parse(self, message: str) -> ParsedCommit:
        """Parse one raw commit message.

        Args:
            message: Full commit message (header plus optional body/footers)

        Returns:
            The parsed commit

        Raises:
            CommitParseError: If the header does not follow the grammar or the
                scope is rejected by ``scope_regex``
        """
        header, _, body = message.strip().partition("\n")
        header = header.strip()

        match = HEADER_PATTERN.match(header)
        if not match:
            raise CommitParseError(f"Not a conventional commit header: {header!r}")

        scope = match.group("scope")
        if scope is not None and self._scope_re and not self._scope_re.fullmatch(scope):
            raise CommitParseError(
                f"Scope {scope!r} does not match {self.scope_regex!r}: {header!r}"
            )

        body = body.strip("\n")
        breaking = match.group("breaking") is not None or bool(self._breaking_re.search(body))
        raw_type = match.group("type").lower()

        return ParsedCommit(
            commit_type=CommitType.from_token(raw_type),
            scope=scope,
            breaking=breaking,
            description=match.group("description").strip(),
            raw_type=raw_type,
            body=body,
        )


def _compile(name: str, pattern: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise ConfigValidationError(f"Invalid {name} {pattern!r}: {e}") from e


def parse_commit(message: str, scope_regex: str | None = None) -> ParsedCommit:
    """Parse a single message with a throwaway :class:`CommitParser`."""
    return CommitParser(scope_regex=scope_regex).parse(message)


def parse_commits(messages: Iterable[str], parser: CommitParser) -> Iterator[ParsedCommit]:
    """Lazily parse messages, skipping those that are not conventional commits.

    Args:
        messages: Raw commit messages, consumed one at a time
        parser: Parser to apply

    Yields:
        Parsed commits, in input order
    """
    for message in messages:
        try:
            yield parser.parse(message)
        except CommitParseError as e:
            logger.debug("Skipping commit: %s", e)
