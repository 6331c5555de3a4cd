"""Typer application for bump-py."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from bump_py import __version__
from bump_py.core.bump import BumpRequest
from bump_py.log import setup_logging

app = typer.Typer(
    name="bump-py",
    help="Compute the next semantic version from conventional commits.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _print_version(value: bool) -> None:
    if value:
        console.print(f"bump-py {__version__}", highlight=False)
        raise typer.Exit


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging on stderr.")
    ] = False,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_print_version,
            is_eager=True,
            help="Show the bump-py version and exit.",
        ),
    ] = False,
) -> None:
    """Compute the next semantic version from conventional commits."""
    setup_logging(verbose, err_console)


@app.command()
def version(
    path: Annotated[
        str | None, typer.Option("--path", "-C", help="Project directory (default: cwd).")
    ] = None,
    rev: Annotated[str, typer.Option(help="Revision to compute the version for.")] = "HEAD",
    prefix: Annotated[
        str | None, typer.Option(help="Version tag prefix (default from config: 'v').")
    ] = None,
    major: Annotated[bool, typer.Option("--major", help="Force a major bump.")] = False,
    minor: Annotated[bool, typer.Option("--minor", help="Force a minor bump.")] = False,
    patch: Annotated[bool, typer.Option("--patch", help="Force a patch bump.")] = False,
    bump: Annotated[
        bool, typer.Option("--bump", help="Derive the bump from commits since the last tag.")
    ] = False,
    label: Annotated[
        bool,
        typer.Option("--label", help="Print major|minor|patch|release instead of the version."),
    ] = False,
) -> None:
    """Print the current version, or the next one with --bump/--major/--minor/--patch."""
    if sum((major, minor, patch)) > 1:
        raise typer.BadParameter("--major, --minor and --patch are mutually exclusive")

    from bump_py.cli.commands.version import run_version

    run_version(
        path=path,
        rev=rev,
        prefix=prefix,
        request=BumpRequest(major=major, minor=minor, patch=patch, bump=bump),
        label=label,
        console=console,
        err_console=err_console,
    )


def main() -> None:
    app()
