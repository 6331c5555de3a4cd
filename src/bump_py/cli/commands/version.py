"""Implementation of the 'version' command.

The version command prints the last tagged version, or with ``--bump`` and
friends the next one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from bump_py.config import load_config
from bump_py.core.bump import resolve_bump
from bump_py.exceptions import BumpPyError
from bump_py.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from bump_py.core.bump import BumpRequest, BumpResult

logger = logging.getLogger(__name__)


def compute_version(
    path: str | None,
    rev: str,
    prefix: str | None,
    request: BumpRequest,
) -> BumpResult:
    """Resolve the version for the project at ``path``.

    Args:
        path: Optional path to the project directory
        rev: Revision to compute the version for
        prefix: Tag prefix, overriding the configured one when given
        request: Manual bump flags

    Returns:
        The resolved version and label

    Raises:
        BumpPyError: On configuration or git failures
    """
    project_path = Path(path) if path else Path.cwd()

    config = load_config(project_path)
    parser = config.commits.build_parser()
    tag_prefix = config.tag_prefix if prefix is None else prefix
    logger.debug("Resolving version of %s at %s (tag prefix %r)", project_path, rev, tag_prefix)

    repo = GitRepository(project_path)
    last = repo.find_last_version(rev, tag_prefix)
    messages = repo.iter_commit_messages(last.tag if last else None, rev)

    try:
        return resolve_bump(last, messages, request, parser, initial_version=config.initial)
    finally:
        messages.close()


def run_version(
    path: str | None,
    rev: str,
    prefix: str | None,
    request: BumpRequest,
    label: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the version command.

    Args:
        path: Optional path to project directory
        rev: Revision to compute the version for
        prefix: Tag prefix override
        request: Manual bump flags
        label: Print the bump label instead of the version
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        result = compute_version(path, rev, prefix, request)
    except BumpPyError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        raise SystemExit(1) from e

    if label and not result.is_initial:
        console.print(str(result.label), highlight=False, markup=False)
    else:
        console.print(str(result.version), highlight=False, markup=False)
