"""Tests for external command execution."""

import sys

from niri_setup.commands import format_argv, run_command


def test_combines_stdout_and_stderr():
    outcome = run_command(
        [sys.executable, "-c", "import sys; print('out', flush=True); print('err', file=sys.stderr)"]
    )
    assert outcome.succeeded is True
    assert "out" in outcome.output
    assert "err" in outcome.output


def test_nonzero_exit_reported():
    outcome = run_command([sys.executable, "-c", "import sys; print('broken'); sys.exit(3)"])
    assert outcome.succeeded is False
    assert outcome.returncode == 3
    assert outcome.output.strip() == "broken"


def test_missing_executable():
    outcome = run_command(["definitely-not-a-real-command-niri"])
    assert outcome.returncode == 127
    assert "Command not found" in outcome.output


def test_argv_is_recorded_as_tuple():
    outcome = run_command([sys.executable, "-c", "pass"])
    assert outcome.argv == (sys.executable, "-c", "pass")


def test_format_argv_quotes():
    assert format_argv(["niri", "validate", "a b"]) == "niri validate 'a b'"


def test_undecodable_output_does_not_raise():
    outcome = run_command(
        [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'caf\\xe9\\n'); sys.exit(0)"]
    )
    assert outcome.succeeded is True
    assert outcome.output.startswith("caf")
    assert "�" in outcome.output
