"""Tests for the bump-py command line."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from bump_py.cli.app import app

runner = CliRunner()


def run(*args: str):
    return runner.invoke(app, ["version", *args])


@pytest.fixture
def released_repo(git_repo):
    """Repository tagged v1.2.3 with a fix and a feat on top."""
    git_repo.commit("chore: init").tag("v1.2.3")
    git_repo.commit("fix: crash on empty input")
    git_repo.commit("feat(api): add endpoint")
    return git_repo


class TestVersionCommand:
    """Tests for `bump-py version`."""

    def test_prints_last_version(self, released_repo):
        result = run("--path", str(released_repo.path))

        assert result.exit_code == 0
        assert result.stdout.strip() == "1.2.3"

    def test_bump(self, released_repo):
        result = run("--path", str(released_repo.path), "--bump")

        assert result.exit_code == 0
        assert result.stdout.strip() == "1.3.0"

    def test_bump_label(self, released_repo):
        result = run("--path", str(released_repo.path), "--bump", "--label")

        assert result.exit_code == 0
        assert result.stdout.strip() == "minor"

    @pytest.mark.parametrize(
        ("flag", "expected"),
        [("--major", "2.0.0"), ("--minor", "1.3.0"), ("--patch", "1.2.4")],
    )
    def test_manual_flags(self, released_repo, flag: str, expected: str):
        result = run("--path", str(released_repo.path), flag)

        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_breaking_change(self, released_repo):
        released_repo.commit("refactor!: drop python 3.10")

        result = run("--path", str(released_repo.path), "--bump")

        assert result.stdout.strip() == "2.0.0"

    def test_prerelease_is_released(self, git_repo):
        git_repo.commit("feat!: big").tag("v3.0.0-rc.1")
        git_repo.commit("fix: last minute")

        result = run("--path", str(git_repo.path), "--bump", "--label")

        assert result.stdout.strip() == "release"

    def test_no_tag_prints_initial_version(self, git_repo):
        git_repo.commit("feat: first feature")

        result = run("--path", str(git_repo.path), "--bump", "--label")

        assert result.exit_code == 0
        assert result.stdout.strip() == "0.1.0"

    def test_prefix_option(self, git_repo):
        git_repo.commit("chore: init").tag("release-0.4.0")
        git_repo.commit("feat: x")

        result = run("--path", str(git_repo.path), "--prefix", "release-", "--bump")

        assert result.stdout.strip() == "0.4.1"

    def test_rev_option(self, released_repo):
        result = run("--path", str(released_repo.path), "--bump", "--rev", "HEAD~1")

        assert result.stdout.strip() == "1.2.4"

    def test_scope_regex_from_config(self, released_repo):
        (released_repo.path / "pyproject.toml").write_text(
            '[tool.bump-py.commits]\nscope_regex = "^core$"\n'
        )

        result = run("--path", str(released_repo.path), "--bump")

        assert result.stdout.strip() == "1.2.4"

    def test_not_a_repository(self, tmp_path):
        result = run("--path", str(tmp_path / "missing"))

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_bad_revision(self, released_repo):
        result = run("--path", str(released_repo.path), "--rev", "nope", "--bump")

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_exclusive_flags(self, released_repo):
        result = run("--path", str(released_repo.path), "--major", "--minor")

        assert result.exit_code == 2


class TestApp:
    """Tests for the top-level application."""

    @pytest.mark.parametrize("flag", ["--version", "-V"])
    def test_version_flag(self, flag: str):
        """The top-level flag prints the tool version, unlike the subcommand."""
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert result.stdout.startswith("bump-py ")

    def test_verbose_logs_to_stderr(self, released_repo):
        result = runner.invoke(app, ["-v", "version", "--path", str(released_repo.path), "--bump"])

        assert result.exit_code == 0
        assert "1.3.0" in result.output.splitlines()
