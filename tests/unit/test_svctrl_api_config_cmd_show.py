"""Unit tests for svctrl.api.config.cmd_show."""

from svctrl.api.config.cmd_show import cmd_show
from tests.conftest import run_cmd


def test_cmd_show_reports_values(config_file, svdir, lndir):
    result = run_cmd(cmd_show)
    assert result.success is True
    assert result.output["config_path"] == str(config_file)
    assert result.output["content"] == {"svdir": str(svdir), "lndir": str(lndir)}
    assert result.output["warnings"] == []


def test_cmd_show_warns_on_missing_directory(config_file, svdir, lndir):
    lndir.rmdir()
    result = run_cmd(cmd_show)
    assert result.success is True
    assert "lndir" in result.output["warnings"][0]


def test_cmd_show_invalid_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{invalid")
    result = run_cmd(cmd_show, path)
    assert result.success is False
    assert result.output["config_path"] == str(path)
    assert result.output["content"] == {}
