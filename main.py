"""
Main entry point for clippy-lints.

This module provides the main entry point for the CLI application.
"""

from clippy_lints.cli.main import app

if __name__ == "__main__":
    app()
