"""Unit tests for svctrl.api.service.read_state."""

import pytest

from svctrl.api.service.ServiceError import ReadFailed
from svctrl.api.service.read_state import read_state


def test_read_state_returns_content(tmp_path):
    path = tmp_path / "stat"
    path.write_text("down\n")
    assert read_state(path) == "down\n"


def test_read_state_empty_is_valid(tmp_path):
    path = tmp_path / "pid"
    path.write_text("")
    assert read_state(path) == ""


def test_read_state_missing_file(tmp_path):
    with pytest.raises(ReadFailed) as exc_info:
        read_state(tmp_path / "missing")
    assert exc_info.value.path == tmp_path / "missing"
    assert isinstance(exc_info.value.cause, FileNotFoundError)
