"""
Tests for the command-line interface.

``subprocess.Popen`` is replaced with a fake so no cargo is needed.
"""

import errno
import sys

import pytest
from typer.testing import CliRunner

from clippy_lints.cli.main import app
from clippy_lints.core import runner as runner_module

cli = CliRunner()


class FakePopen:
    """Records the command and returns a fixed status from wait()."""

    calls: list[list[str]] = []
    status = 0
    spawn_error: OSError | None = None

    def __init__(self, command):
        if FakePopen.spawn_error is not None:
            raise FakePopen.spawn_error
        FakePopen.calls.append(list(command))

    def wait(self):
        return FakePopen.status


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    FakePopen.status = 0
    FakePopen.spawn_error = None
    monkeypatch.setattr(runner_module.subprocess, "Popen", FakePopen)
    return FakePopen


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A project with a lints file at its root, entered through a subdirectory."""
    root = tmp_path / "proj"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "lints.toml").write_text(
        'deny = ["unwrap_used"]\nwarn = []\nallow = ["dead_code"]\n'
    )
    monkeypatch.chdir(sub)
    return root


def invoke(monkeypatch, *args: str):
    """Run the app as the shell would, with sys.argv set to match."""
    monkeypatch.setattr(sys, "argv", ["cargo-clippy-lints", *args])
    return cli.invoke(app, list(args))


class TestCli:
    """Test the clippy-lints command."""

    def test_delegated_success(self, monkeypatch, project, fake_popen):
        """Test a cargo subcommand run forwards arguments and adds the lint flags."""
        result = invoke(monkeypatch, "clippy-lints", "--all-targets")

        assert result.exit_code == 0
        assert fake_popen.calls == [[
            "cargo", "clippy", "--all-targets", "--",
            "-D", "unwrap_used", "-A", "dead_code",
        ]]
        assert 'Running "cargo", "clippy", "--all-targets"' in result.output

    def test_direct_success(self, monkeypatch, project, fake_popen):
        """Test a direct run forwards every argument."""
        result = invoke(monkeypatch, "-p", "core")

        assert result.exit_code == 0
        assert fake_popen.calls[0][:5] == ["cargo", "clippy", "-p", "core", "--"]

    def test_caller_separator_kept(self, monkeypatch, project, fake_popen):
        """Test a caller's own "--" is forwarded verbatim."""
        result = invoke(monkeypatch, "clippy-lints", "--", "-W", "clippy::pedantic")

        assert result.exit_code == 0
        assert fake_popen.calls[0] == [
            "cargo", "clippy", "--", "-W", "clippy::pedantic", "--",
            "-D", "unwrap_used", "-A", "dead_code",
        ]

    def test_help_is_forwarded(self, monkeypatch, project, fake_popen):
        """Test --help goes to clippy rather than being handled here."""
        result = invoke(monkeypatch, "clippy-lints", "--help")

        assert result.exit_code == 0
        assert fake_popen.calls[0][:4] == ["cargo", "clippy", "--help", "--"]

    def test_clippy_failure(self, monkeypatch, project, fake_popen):
        """Test clippy's own status becomes the exit code."""
        fake_popen.status = 101
        result = invoke(monkeypatch, "clippy-lints")

        assert result.exit_code == 101
        assert "Clippy returned non-0 status: 101" in result.output

    def test_spawn_failure(self, monkeypatch, project, fake_popen):
        """Test a missing cargo is reported and exits 1."""
        fake_popen.spawn_error = FileNotFoundError(errno.ENOENT, "No such file or directory", "cargo")
        result = invoke(monkeypatch, "clippy-lints")

        assert result.exit_code == 1
        assert "Unable to start clippy" in result.output
        assert "No such file or directory" in result.output

    def test_malformed_config(self, monkeypatch, project, fake_popen):
        """Test a malformed lints file exits 1 without running clippy."""
        (project / "lints.toml").write_text("deny = [")
        result = invoke(monkeypatch, "clippy-lints")

        assert result.exit_code == 1
        assert "Failed to parse config" in result.output
        assert fake_popen.calls == []

    def test_interrupted(self, monkeypatch, project, fake_popen):
        """Test Ctrl-C while waiting waits for clippy again and exits 130."""
        waits = []

        def interrupted(self):
            waits.append(1)
            if len(waits) == 1:
                raise KeyboardInterrupt
            return 130

        monkeypatch.setattr(FakePopen, "wait", interrupted)
        result = invoke(monkeypatch, "clippy-lints")

        assert result.exit_code == 130
        assert "interrupted" in result.output
        assert len(waits) == 2

    def test_wait_failure(self, monkeypatch, project, fake_popen):
        """Test a child that cannot be waited on is reported separately from a failing one."""
        def broken(self):
            raise ChildProcessError("no child")

        monkeypatch.setattr(FakePopen, "wait", broken)
        result = invoke(monkeypatch, "clippy-lints")

        assert result.exit_code == 1
        assert "Unable to wait for clippy" in result.output
        assert "no child" in result.output
