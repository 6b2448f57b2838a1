"""
Clippy invocation.

This module classifies the raw process arguments, builds the full
``cargo clippy`` command line from a lint set and runs it, turning the
child's exit status into success or a ToolNonZeroExit.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Iterable, Sequence
from pathlib import Path

from rich.console import Console

from .config import from_config
from .errors import ToolNonZeroExit, ToolSpawnFailure, ToolWaitFailure
from .models import Invocation, InvocationMode, LintConfig, RunnerConfig


def split_invocation(argv: Sequence[str], config: RunnerConfig | None = None) -> Invocation:
    """
    Classify how we were started and collect the passthrough arguments.

    ``cargo clippy-lints a b`` runs us as ``cargo-clippy-lints clippy-lints a b``,
    so the sentinel in second position is dropped along with the program path.

    Args:
        argv: Full process arguments, program path first
        config: Runner settings holding the sentinel

    Returns:
        The invocation mode, program path and passthrough arguments
    """
    config = config or RunnerConfig()
    program = argv[0] if argv else None
    if len(argv) > 1 and argv[1] == config.sentinel:
        mode = InvocationMode.DELEGATED
    else:
        mode = InvocationMode.DIRECT
    return Invocation(mode=mode, program=program, args=list(argv[mode.skip:]))


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


def build_command(lints: LintConfig, args: Iterable[str], config: RunnerConfig | None = None) -> list[str]:
    """
    Build the clippy command line.

    The layout is ``cargo clippy <args...> -- <warn> <deny> <allow>``.
    """
    config = config or RunnerConfig()
    return [config.program, config.subcommand, *args, config.separator, *lints.flags()]


def format_command(command: Sequence[str]) -> str:
    """Render a command as ``Running "cargo", "clippy", ...`` for stderr, quotes escaped."""
    return "Running " + ", ".join(json.dumps(arg, ensure_ascii=False) for arg in command)


def check_status(returncode: int) -> None:
    """
    Raise if clippy did not succeed.

    Raises:
        ToolNonZeroExit: If ``returncode`` is not 0
    """
    if returncode != 0:
        raise ToolNonZeroExit(returncode)


def run_clippy(
    lints: LintConfig,
    args: Iterable[str],
    config: RunnerConfig | None = None,
    console: Console | None = None,
) -> int:
    """
    Run clippy with ``args`` and the flags for ``lints``.

    The child inherits stdin, stdout and stderr, and is waited on without
    a timeout.

    Args:
        lints: Lint set to turn into flags
        args: Passthrough arguments, placed before the separator
        config: Runner settings
        console: Console for the diagnostic line, stderr by default

    Returns:
        The child's exit status

    Raises:
        ToolSpawnFailure: If the program could not be started
        ToolWaitFailure: If the child could not be waited on
    """
    config = config or RunnerConfig()
    console = console or Console(stderr=True)
    command = build_command(lints, args, config)

    console.print(format_command(command), markup=False, highlight=False, soft_wrap=True)

    try:
        process = subprocess.Popen(command)
    except OSError as e:
        raise ToolSpawnFailure(config.program, _reason(e)) from e

    try:
        return process.wait()
    except KeyboardInterrupt:
        # The child got the same SIGINT, let it finish its output first
        process.wait()
        raise
    except OSError as e:
        raise ToolWaitFailure(config.program, _reason(e)) from e


def run(
    argv: Sequence[str],
    start: Path | None = None,
    config: RunnerConfig | None = None,
    console: Console | None = None,
) -> None:
    """
    Load the lints, run clippy with them and check its status.

    Args:
        argv: Full process arguments, program path first
        start: Directory to search for the lints file from, the current directory by default
        config: Runner settings
        console: Console for diagnostics

    Raises:
        ClippyLintsError: On any failure, including clippy reporting one
    """
    config = config or RunnerConfig()
    lints = from_config(start, config)
    invocation = split_invocation(argv, config)
    check_status(run_clippy(lints, invocation.args, config, console))
