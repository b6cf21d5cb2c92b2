"""Unit tests for svctrl.api.service.cmd_stop."""

import pytest

from svctrl.api.service.cmd_stop import cmd_stop
from tests.conftest import make_supervise, run_cmd

pytestmark = pytest.mark.timeout(10)


def test_cmd_stop_keeps_service_enabled(config_file, svdir, lndir):
    (svdir / "a").mkdir()
    (lndir / "a").symlink_to(svdir / "a")
    make_supervise(svdir / "a", stat="down\n")

    result = run_cmd(cmd_stop, ["a"])

    assert result.success is True
    assert result.output["services"][0]["message"] == "service 'a' stopped"
    assert (lndir / "a").is_symlink()


def test_cmd_stop_not_enabled(config_file, svdir):
    (svdir / "a").mkdir()
    result = run_cmd(cmd_stop, ["a"])
    assert result.success is False
    assert result.output["services"][0]["kind"] == "NotEnabled"
