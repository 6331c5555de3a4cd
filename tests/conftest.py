"""Shared fixtures for bump-py tests."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

GIT_ENV = {
    "GIT_AUTHOR_NAME": "Test",
    "GIT_AUTHOR_EMAIL": "test@test.com",
    "GIT_COMMITTER_NAME": "Test",
    "GIT_COMMITTER_EMAIL": "test@test.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}


class GitRepoBuilder:
    """Build a throwaway git repository commit by commit."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._env = {**os.environ, **GIT_ENV, "HOME": str(path.parent)}
        self.git("init", "-q")
        self.git("config", "commit.gpgsign", "false")
        self.git("config", "tag.gpgsign", "false")

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=self.path,
            env=self._env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, message: str) -> GitRepoBuilder:
        self.git("commit", "-q", "--allow-empty", "-m", message)
        return self

    def tag(self, name: str) -> GitRepoBuilder:
        self.git("tag", name)
        return self


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepoBuilder:
    """Empty git repository in a temporary directory."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    return GitRepoBuilder(repo_path)


@pytest.fixture
def temp_git_repo_with_pyproject(git_repo: GitRepoBuilder) -> Path:
    """Git repository with a pyproject.toml carrying a [tool.bump-py] section."""
    (git_repo.path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.bump-py]
tag_prefix = "v"

[tool.bump-py.commits]
scope_regex = "^(api|core)$"
"""
    )
    return git_repo.path


@pytest.fixture
def feat_message() -> str:
    return "feat: add user authentication"


@pytest.fixture
def fix_message() -> str:
    return "fix(core): handle edge case"


@pytest.fixture
def breaking_message() -> str:
    return "feat(api): redesign endpoints\n\nBREAKING CHANGE: v1 endpoints removed"


@pytest.fixture
def sample_messages(feat_message: str, fix_message: str, breaking_message: str) -> list[str]:
    """Mixed history, newest first, with a merge commit and a breaking change."""
    return [
        "docs: update readme",
        "Merge branch 'feature/auth'",
        feat_message,
        fix_message,
        "chore: bump dependencies",
        breaking_message,
    ]
