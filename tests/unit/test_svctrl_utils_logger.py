"""Unit tests for svctrl.utils.logger."""

import logging

import pytest

from svctrl.utils import logger as logger_module


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("svctrl")
    handlers = list(root.handlers)
    yield root
    for handler in root.handlers[len(handlers):]:
        handler.close()
    root.handlers = handlers


def test_get_svctrl_home_env(svctrl_home):
    assert logger_module.get_svctrl_home() == svctrl_home.resolve()


def test_get_svctrl_home_default(monkeypatch, tmp_path):
    monkeypatch.delenv("SVCTRL_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert logger_module.get_svctrl_home() == tmp_path / ".svctrl"


def test_configure_logging_writes_file(fresh_logging, tmp_path):
    logger_module.configure_logging(tmp_path)
    logging.getLogger("svctrl.api.service.enable").info("hello")
    for handler in fresh_logging.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "svctrl.log").read_text()


def test_configure_logging_once(fresh_logging, tmp_path):
    logger_module.configure_logging(tmp_path)
    count = len(fresh_logging.handlers)
    logger_module.configure_logging(tmp_path)
    assert len(fresh_logging.handlers) == count
