import logging
from pathlib import Path

import pytest

from velfi.core import logger as core_logger


def test_logger_writes_rotating_file(tmp_path):
    log = core_logger.get_logger(log_dir=tmp_path / "logs")
    log.info("hello from test")
    for handler in log.handlers:
        handler.flush()

    assert log.name == "velfi"
    assert log.propagate is False
    assert "hello from test" in (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")


def test_logger_is_configured_once(tmp_path):
    first = core_logger.get_logger(log_dir=tmp_path)
    second = core_logger.get_logger()
    assert first is second
    assert len(first.handlers) == 2


def test_child_logger_and_default_location(monkeypatch, tmp_path):
    monkeypatch.setenv("VELFI_HOME", str(tmp_path / "home"))

    child = core_logger.get_logger("documents")

    assert child.name == "velfi.documents"
    assert Path(tmp_path / "home" / "logs").is_dir()


def test_set_level():
    assert core_logger.set_level("debug") == logging.DEBUG
    assert core_logger.get_logger().level == logging.DEBUG
    with pytest.raises(ValueError):
        core_logger.set_level("chatty")
