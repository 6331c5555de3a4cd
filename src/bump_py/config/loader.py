"""Load bump-py configuration from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bump_py.config.models import BumpPyConfig
from bump_py.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_KEY = "bump-py"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find the nearest pyproject.toml, searching upward from ``start``.

    The search does not leave the git work tree containing ``start``.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the repository root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
        if (directory / ".git").exists():
            break
    raise ConfigNotFoundError(
        f"No pyproject.toml found in {current} or its parents up to the repository root"
    )


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def extract_bump_py_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.bump-py]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_KEY, {})


def load_config(path: Path | None = None) -> BumpPyConfig:
    """Load configuration for the project at ``path``.

    Defaults are used when there is no pyproject.toml or no
    ``[tool.bump-py]`` section.

    Raises:
        ConfigError: If pyproject.toml cannot be parsed
        ConfigValidationError: If the section holds invalid values
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        logger.debug("No pyproject.toml found, using default configuration")
        return BumpPyConfig()

    raw = extract_bump_py_config(load_pyproject_toml(pyproject_path))
    try:
        config = BumpPyConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid [tool.{TOOL_KEY}] configuration in {pyproject_path}",
            details=str(e),
        ) from e

    logger.debug("Loaded configuration from %s", pyproject_path)
    return config
