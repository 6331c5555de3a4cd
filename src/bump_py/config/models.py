"""Configuration models for bump-py.

Values come from the ``[tool.bump-py]`` table of ``pyproject.toml``::

    [tool.bump-py]
    tag_prefix = "v"
    initial_version = "0.1.0"

    [tool.bump-py.commits]
    scope_regex = "^(api|cli)$"
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bump_py.core.commits import DEFAULT_BREAKING_PATTERN, CommitParser
from bump_py.core.version import Version
from bump_py.exceptions import VersionError


class CommitsConfig(BaseModel):
    """How commit messages are parsed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scope_regex: str | None = Field(
        default=None,
        description="Only accept scopes matching this regex",
    )
    breaking_pattern: str = Field(
        default=DEFAULT_BREAKING_PATTERN,
        description="Regex detecting a breaking-change footer in the commit body",
    )

    @field_validator("scope_regex", "breaking_pattern")
    @classmethod
    def _check_regex(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    def build_parser(self) -> CommitParser:
        return CommitParser(
            scope_regex=self.scope_regex,
            breaking_pattern=self.breaking_pattern,
        )


class BumpPyConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag_prefix: str = Field(default="v", description="Prefix of version tags")
    initial_version: str = Field(
        default="0.1.0",
        description="Version reported when the repository has no version tag",
    )
    commits: CommitsConfig = Field(default_factory=CommitsConfig)

    @field_validator("initial_version")
    @classmethod
    def _check_initial_version(cls, value: str) -> str:
        try:
            Version.parse(value)
        except VersionError as e:
            raise ValueError(str(e)) from e
        return value

    @property
    def initial(self) -> Version:
        return Version.parse(self.initial_version)
