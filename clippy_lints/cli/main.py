"""
Command-line interface for clippy-lints.

Installed as ``cargo-clippy-lints`` so that ``cargo clippy-lints`` finds it.
The tool defines no options of its own: every argument is forwarded to
``cargo clippy`` ahead of the lint flags.
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from ..core.errors import ClippyLintsError
from ..core.runner import run

# Initialize CLI app
app = typer.Typer(
    name="cargo-clippy-lints",
    help="Run cargo clippy with the lints declared in lints.toml",
    add_completion=False,
)

# Diagnostics go to stderr, stdout belongs to clippy
console = Console(stderr=True)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def clippy_lints(ctx: typer.Context) -> None:
    """
    Run cargo clippy with deny/warn/allow flags from the nearest lints.toml.
    """
    # Click drops a literal "--" from ctx.args, so forward the raw arguments
    try:
        run(sys.argv, console=console)
    except KeyboardInterrupt:
        console.print("\n[yellow]Clippy interrupted by user[/yellow]")
        raise typer.Exit(130)
    except ClippyLintsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(e.exit_code)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
