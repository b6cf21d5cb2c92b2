"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from svctrl.api.service.Service import Service


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests that only touch tmp_path")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Service Tree Helpers
# =============================================================================


def make_supervise(service_dir: Path, stat: str = "run\n", pid: str = "", log: bool = False) -> Path:
    """Create the files a runsv supervisor maintains inside ``service_dir``.

    ``supervise/control`` is a regular file standing in for the named pipe.
    With ``log=True`` the same files are created for ``service_dir/log``.
    """
    supervise = service_dir / "supervise"
    supervise.mkdir(parents=True, exist_ok=True)
    (supervise / "control").write_text("")
    (supervise / "stat").write_text(stat)
    (supervise / "pid").write_text(pid)
    if log:
        make_supervise(service_dir / "log", stat=stat, pid=pid)
    return supervise


@pytest.fixture(autouse=True)
def svctrl_home(tmp_path, monkeypatch) -> Path:
    """Keep svctrl state and configuration lookups inside the test's tmp_path."""
    home = tmp_path / "svctrl_home"
    monkeypatch.setenv("SVCTRL_HOME", str(home))
    monkeypatch.delenv("SVCTRL_CONFIG", raising=False)
    return home


@pytest.fixture
def svdir(tmp_path) -> Path:
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def lndir(tmp_path) -> Path:
    path = tmp_path / "dst"
    path.mkdir()
    return path


@pytest.fixture
def service(svdir, lndir) -> Service:
    """A defined but disabled service named 'test'."""
    (svdir / "test").mkdir()
    return Service.resolve(svdir, lndir, "test")


@pytest.fixture
def enabled_service(service) -> Service:
    """The 'test' service linked into lndir, with supervisor files present."""
    service.target_path.symlink_to(service.source_path)
    make_supervise(service.source_path)
    return service


@pytest.fixture
def config_file(tmp_path, svdir, lndir, monkeypatch) -> Path:
    """Write a config pointing at svdir/lndir and select it via SVCTRL_CONFIG."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"svdir": str(svdir), "lndir": str(lndir)}))
    monkeypatch.setenv("SVCTRL_CONFIG", str(path))
    return path
