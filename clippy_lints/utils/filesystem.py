"""
File system utilities.

This module provides the small path helpers used to discover and
read the lints file.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def path_exists(path: Path) -> bool:
    """
    Check if anything exists at a path.

    Args:
        path: Path to check

    Returns:
        True if a file, directory or other entry exists, False otherwise
    """
    return path.exists()


def iter_ancestors(start: Path) -> Iterator[Path]:
    """
    Yield a directory followed by each of its parents up to the root.

    Args:
        start: Absolute directory to start from

    Yields:
        ``start``, its parent, its grandparent and so on, ending with the root
    """
    current = start
    while True:
        yield current
        parent = current.parent
        if parent == current:
            return
        current = parent


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a whole file as text.

    Unlike a "safe" read, failures are not swallowed: the caller decides
    how an unreadable file is reported.

    Args:
        path: Path to the file
        encoding: File encoding

    Returns:
        File content as string

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the content is not valid for ``encoding``
    """
    with open(path, encoding=encoding) as f:
        return f.read()
