"""Pytest fixtures for niri-setup tests."""

from dataclasses import replace
from typing import Sequence

import pytest

from niri_setup import environment
from niri_setup.config import DEFAULT_CONFIG, Settings
from niri_setup.types import CommandOutcome


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary home and working directory."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    (cwd / "config.kdl").write_text("input { keyboard { } }\n")
    home = tmp_path / "home"
    home.mkdir()

    cfg = dict(DEFAULT_CONFIG)
    cfg["packages"] = ["x", "y"]
    base = Settings.from_config(cfg, cwd=cwd, home=home)
    # Keep the session log out of the real temp directory
    return replace(base, log_file=tmp_path / "nirisetup.log", runtime_dir_base=tmp_path)


@pytest.fixture
def fake_runner():
    """Command runner that records argv and fails for chosen last arguments."""

    class FakeRunner:
        def __init__(self):
            self.calls: list[tuple[str, ...]] = []
            self.failures: dict[str, tuple[int, str]] = {}

        def fail(self, last_arg: str, returncode: int = 1, output: str = "error"):
            self.failures[last_arg] = (returncode, output)

        def __call__(self, argv: Sequence[str]) -> CommandOutcome:
            argv = tuple(argv)
            self.calls.append(argv)
            if argv[-1] in self.failures:
                returncode, output = self.failures[argv[-1]]
                return CommandOutcome(argv, returncode, output)
            return CommandOutcome(argv, 0, "ok\n")

    return FakeRunner()


@pytest.fixture(autouse=True)
def _reset_runtime_env():
    environment.reset_environment()
    yield
    environment.reset_environment()


@pytest.fixture
def dispatched():
    """Dispatcher stub that records (action, log snapshot) pairs."""

    class Recorder(list):
        def __call__(self, action, log_lines):
            self.append((action, log_lines))

    return Recorder()
