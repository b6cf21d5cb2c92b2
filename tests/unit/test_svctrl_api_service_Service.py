"""Unit tests for svctrl.api.service.Service."""

import os

import pytest

from svctrl.api.service.ActivationState import ActivationState
from svctrl.api.service.Service import Service
from svctrl.api.service.ServiceError import ConfigDirMissing, InspectFailed, InvalidName


def test_resolve_derives_both_paths(svdir, lndir):
    service = Service.resolve(svdir, lndir, "sshd")
    assert service.source_path == svdir / "sshd"
    assert service.target_path == lndir / "sshd"


@pytest.mark.parametrize("missing", ["svdir", "lndir"])
def test_resolve_requires_existing_directories(tmp_path, missing):
    dirs = {"svdir": tmp_path / "src", "lndir": tmp_path / "dst"}
    for key, path in dirs.items():
        if key != missing:
            path.mkdir()

    with pytest.raises(ConfigDirMissing) as exc_info:
        Service.resolve(dirs["svdir"], dirs["lndir"], "sshd")

    assert exc_info.value.directory == dirs[missing]
    assert exc_info.value.name == "sshd"


def test_resolve_rejects_file_as_directory(tmp_path, lndir):
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("")
    with pytest.raises(ConfigDirMissing):
        Service.resolve(not_a_dir, lndir, "sshd")


def test_renamed_never_accumulates_paths(svdir, lndir):
    a = Service.resolve(svdir, lndir, "a")
    b = a.renamed("b")
    assert b.name == "b"
    assert b.source_path == svdir / "b"
    assert b.target_path == lndir / "b"
    assert b.source_path != svdir / "a" / "b"
    # The original value is untouched
    assert a.source_path == svdir / "a"


def test_renamed_repeatedly(svdir, lndir):
    service = Service.resolve(svdir, lndir, "test")
    for name in ["test", "test1", "test2"]:
        service = service.renamed(name)
        assert service.source_path == svdir / name
        assert service.target_path == lndir / name


def test_service_is_immutable(service):
    with pytest.raises(AttributeError):
        service.name = "other"  # type: ignore[misc]


def test_make_path(service, lndir):
    assert service.make_path("supervise/pid") == lndir / "test" / "supervise" / "pid"
    assert service.make_path("log") == lndir / "test" / "log"


def test_activation_state_disabled(service):
    assert service.activation_state() is ActivationState.DISABLED
    assert service.target_exists() is False


def test_activation_state_enabled_here(service):
    service.target_path.symlink_to(service.source_path)
    assert service.activation_state() is ActivationState.ENABLED_HERE


def test_activation_state_relative_link_to_source(service):
    os.symlink(os.path.relpath(service.source_path, service.lndir), service.target_path)
    assert service.activation_state() is ActivationState.ENABLED_HERE


def test_activation_state_mismatch(service, tmp_path):
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    service.target_path.symlink_to(elsewhere)
    assert service.activation_state() is ActivationState.MISMATCH


@pytest.mark.parametrize("kind", ["dir", "file"])
def test_activation_state_blocked(service, kind):
    if kind == "dir":
        service.target_path.mkdir()
    else:
        service.target_path.write_text("")
    assert service.activation_state() is ActivationState.BLOCKED


def test_target_exists_counts_dangling_link(service, tmp_path):
    service.target_path.symlink_to(tmp_path / "gone")
    assert service.target_exists() is True


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "/abs", "a\0b"])
def test_resolve_rejects_names_that_are_not_one_component(svdir, lndir, name):
    with pytest.raises(InvalidName) as exc_info:
        Service.resolve(svdir, lndir, name)
    assert exc_info.value.name == name


def test_activation_state_wraps_lstat_failure(tmp_path, svdir):
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("")
    service = Service(svdir, not_a_dir, "a")

    with pytest.raises(InspectFailed) as exc_info:
        service.activation_state()

    assert isinstance(exc_info.value.cause, NotADirectoryError)
    assert exc_info.value.target_path == not_a_dir / "a"


def test_points_here_wraps_readlink_failure(enabled_service, monkeypatch):
    def fail(path):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(os, "readlink", fail)

    with pytest.raises(InspectFailed) as exc_info:
        enabled_service.activation_state()

    assert isinstance(exc_info.value.cause, PermissionError)
