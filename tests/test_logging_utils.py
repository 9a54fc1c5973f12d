"""Tests for file logging setup."""

import logging

import pytest

from niri_setup import logging_utils


def _clear_flags(root):
    for flag in (logging_utils._HANDLER_FLAG, logging_utils._PATH_FLAG):
        if hasattr(root, flag):
            delattr(root, flag)


@pytest.fixture
def root_logger():
    """Root logger restored to its prior handlers, level and flags afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    _clear_flags(root)
    yield root
    for handler in list(root.handlers):
        if type(handler) is logging.FileHandler and handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    _clear_flags(root)


def _added(root, before):
    return [h for h in root.handlers if h not in before]


def test_installs_single_file_handler(root_logger, tmp_path):
    before = list(root_logger.handlers)
    log_path = tmp_path / "logs" / "debug.log"

    assert logging_utils.configure_logging(log_path) == log_path

    added = _added(root_logger, before)
    assert len(added) == 1
    assert isinstance(added[0], logging.FileHandler)
    assert added[0].baseFilename == str(log_path)
    assert log_path.parent.is_dir()


def test_no_console_handler(root_logger, tmp_path):
    before = list(root_logger.handlers)
    logging_utils.configure_logging(tmp_path / "debug.log")
    for handler in _added(root_logger, before):
        # FileHandler subclasses StreamHandler; only file output is allowed
        assert type(handler) is logging.FileHandler


def test_second_call_only_changes_level(root_logger, tmp_path):
    before = list(root_logger.handlers)
    first = logging_utils.configure_logging(tmp_path / "first.log", logging.INFO)

    second = logging_utils.configure_logging(tmp_path / "second.log", logging.DEBUG)

    assert second == first
    assert len(_added(root_logger, before)) == 1
    assert root_logger.level == logging.DEBUG
    assert not (tmp_path / "second.log").exists()


def test_messages_reach_the_file(root_logger, tmp_path):
    log_path = logging_utils.configure_logging(tmp_path / "debug.log")
    logging.getLogger("niri_setup.test").info("hello from %s", "test")
    for handler in root_logger.handlers:
        handler.flush()
    assert "INFO niri_setup.test: hello from test" in log_path.read_text()
