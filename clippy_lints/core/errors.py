"""
Error types for clippy-lints.

Every failure is fatal: library code raises one of these and the CLI
renders it as a single message on stderr before exiting non-zero.
"""

from __future__ import annotations

from pathlib import Path


class ClippyLintsError(Exception):
    """Base class for all clippy-lints failures."""

    exit_code: int = 1


class WorkingDirectoryUnavailable(ClippyLintsError):
    """The current directory could not be determined."""

    def __init__(self) -> None:
        super().__init__("Failed to get current directory")


class ConfigReadFailure(ClippyLintsError):
    """A lints file was found but could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read config {path}: {reason}")


class ConfigParseFailure(ClippyLintsError):
    """A lints file was read but is not valid TOML or has the wrong shape."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse config {path}: {detail}")


class ToolSpawnFailure(ClippyLintsError):
    def __init__(self, program: str, reason: str) -> None:
        self.program = program
        self.reason = reason
        super().__init__(f"Unable to start clippy ({program!r}): {reason}")


class ToolWaitFailure(ClippyLintsError):
    def __init__(self, program: str, reason: str) -> None:
        self.program = program
        self.reason = reason
        super().__init__(f"Unable to wait for clippy ({program!r}): {reason}")


class ToolNonZeroExit(ClippyLintsError):
    """Clippy ran to completion and reported failure."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"Clippy returned non-0 status: {status}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Negative statuses mean the child was killed by a signal
        if 0 < self.status < 256:
            return self.status
        return 1
