"""
Clippy Lints - run cargo clippy with lints declared in a lints.toml file.

This package locates a ``lints.toml`` file in the current directory or any
parent directory, turns its deny/warn/allow lists into clippy flags and runs
``cargo clippy`` with them.
"""

__version__ = "0.1.0"

from .core.errors import ClippyLintsError
from .core.models import Invocation, InvocationMode, LintConfig, RunnerConfig, Severity

__all__ = [
    "ClippyLintsError",
    "Invocation",
    "InvocationMode",
    "LintConfig",
    "RunnerConfig",
    "Severity",
]
