"""
Lints file discovery and loading.

The lints file is searched for in the current directory and then in
every parent directory. The first one found wins; finding none is not an
error and yields an empty lint set.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ..utils.filesystem import iter_ancestors, path_exists, read_text
from .errors import ConfigParseFailure, ConfigReadFailure, WorkingDirectoryUnavailable
from .models import LintConfig, RunnerConfig


def _start_directory(start: Path | None) -> Path:
    if start is not None and start.is_absolute():
        return Path(os.path.abspath(start))

    try:
        cwd = Path.cwd()
    except OSError as e:
        raise WorkingDirectoryUnavailable() from e

    if start is None:
        return cwd
    # Absolute with ".." collapsed, symlinks not resolved
    return Path(os.path.abspath(cwd / start))


def find_config_path(start: Path | None = None, file_name: str = "lints.toml") -> Path | None:
    """
    Find the lints file in ``start`` or any of its parents.

    Only checks for existence; the file is not opened here.

    Args:
        start: Directory to start from, the current directory by default
        file_name: Name of the lints file

    Returns:
        Absolute path of the innermost lints file, or None if there is none
        up to and including the filesystem root

    Raises:
        WorkingDirectoryUnavailable: If the current directory cannot be determined
    """
    for directory in iter_ancestors(_start_directory(start)):
        candidate = directory / file_name
        if path_exists(candidate):
            return candidate
    return None


def load_config(path: Path) -> LintConfig:
    """
    Parse a lints file.

    Args:
        path: Path to the lints file

    Returns:
        The lint set; keys missing from the file are empty lists

    Raises:
        ConfigReadFailure: If the file cannot be read
        ConfigParseFailure: If the file is not valid TOML or not a valid lint set
    """
    try:
        content = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadFailure(path, getattr(e, "strerror", None) or str(e)) from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseFailure(path, str(e)) from e

    try:
        return LintConfig(**data)
    except ValidationError as e:
        raise ConfigParseFailure(path, str(e)) from e


def from_config(start: Path | None = None, config: RunnerConfig | None = None) -> LintConfig:
    """Discover and load the lints file, or return an empty lint set if there is none."""
    config = config or RunnerConfig()
    path = find_config_path(start, config.config_file_name)
    if path is None:
        return LintConfig()
    return load_config(path)
