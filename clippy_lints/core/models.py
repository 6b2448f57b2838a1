"""
Core data models for clippy-lints.

This module defines the lint set read from ``lints.toml``, the runner
settings and the classification of how the program was invoked.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Lint severity categories understood by clippy."""

    DENY = "deny"
    WARN = "warn"
    ALLOW = "allow"

    @property
    def flag(self) -> str:
        """Short clippy flag marker for this severity."""
        return _FLAGS[self]


_FLAGS = {
    Severity.DENY: "-D",
    Severity.WARN: "-W",
    Severity.ALLOW: "-A",
}

# Later flags win for the same lint, so allow comes last
FLAG_ORDER = (Severity.WARN, Severity.DENY, Severity.ALLOW)


class RunnerConfig(BaseModel):
    """Fixed names used when discovering lints and running clippy."""

    program: str = Field(default="cargo", description="Executable to spawn")
    subcommand: str = Field(default="clippy", description="Subcommand passed to the program")
    sentinel: str = Field(
        default="clippy-lints",
        description="Second argument cargo passes when running us as a subcommand",
    )
    separator: str = Field(default="--", description="Token placed before the lint flags")
    config_file_name: str = Field(default="lints.toml", description="Name of the lints file")

    class Config:
        """Pydantic configuration."""
        frozen = True


class LintConfig(BaseModel):
    """All lints defined in a lints file."""

    deny: list[str] = Field(default_factory=list, description="Lints treated as errors")
    warn: list[str] = Field(default_factory=list, description="Lints treated as warnings")
    allow: list[str] = Field(default_factory=list, description="Lints suppressed")

    class Config:
        """Pydantic configuration."""
        extra = "ignore"
        frozen = True

    @classmethod
    def from_config(cls, start: Path | None = None, config: RunnerConfig | None = None) -> LintConfig:
        """Find the lints file from ``start`` upwards and parse it, or return an empty set."""
        from .config import from_config

        return from_config(start, config)

    @classmethod
    def from_config_with_path(cls, path: Path) -> LintConfig:
        """Parse the lints file at ``path``."""
        from .config import load_config

        return load_config(path)

    def lints_for(self, severity: Severity) -> list[str]:
        return getattr(self, severity.value)

    def flags_for(self, severity: Severity) -> list[str]:
        """
        Build the flags for one severity.

        Each lint becomes a marker/name pair, in the order given in the file.
        """
        flags: list[str] = []
        for lint in self.lints_for(severity):
            flags.extend((severity.flag, lint))
        return flags

    def deny_flags(self) -> list[str]:
        return self.flags_for(Severity.DENY)

    def warn_flags(self) -> list[str]:
        return self.flags_for(Severity.WARN)

    def allow_flags(self) -> list[str]:
        return self.flags_for(Severity.ALLOW)

    def flags(self) -> list[str]:
        """All flags: warn first, then deny, then allow."""
        return [flag for severity in FLAG_ORDER for flag in self.flags_for(severity)]

    def is_empty(self) -> bool:
        return not (self.deny or self.warn or self.allow)


class InvocationMode(str, Enum):
    """How the program was started."""

    DIRECT = "direct"
    DELEGATED = "delegated"

    @property
    def skip(self) -> int:
        """Number of leading argv entries that are not passthrough arguments."""
        return 2 if self is InvocationMode.DELEGATED else 1


class Invocation(BaseModel):
    """Result of classifying the raw process arguments."""

    mode: InvocationMode = Field(..., description="Direct run or run by cargo as a subcommand")
    program: str | None = Field(None, description="argv[0], if present")
    args: list[str] = Field(default_factory=list, description="Arguments forwarded to clippy")

    class Config:
        """Pydantic configuration."""
        frozen = True
