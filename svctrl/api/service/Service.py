"""Service value - a service name bound to the two configured directories."""

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .ActivationState import ActivationState
from .ServiceError import ConfigDirMissing, InspectFailed, InvalidName


@dataclass(frozen=True)
class Service:
    """A runit service directory and its activation symlink.

    Both paths are derived from ``(svdir, lndir, name)`` and cannot be set
    independently; use :meth:`renamed` to address another service.
    """

    svdir: Path
    lndir: Path
    name: str

    @classmethod
    def resolve(cls, svdir: Path, lndir: Path, name: str) -> "Service":
        """Build a Service after checking that both directories exist.

        Raises:
            ConfigDirMissing: If ``svdir`` or ``lndir`` is not a directory
            InvalidName: If ``name`` is empty, ``.``, ``..`` or contains ``/`` or NUL
        """
        for directory in (Path(svdir), Path(lndir)):
            if not directory.is_dir():
                raise ConfigDirMissing(directory, name)
        if name in ("", ".", "..") or "/" in name or "\0" in name:
            raise InvalidName(name)
        return cls(Path(svdir), Path(lndir), name)

    def renamed(self, name: str) -> "Service":
        """Return the Service for ``name`` under the same directories."""
        return Service.resolve(self.svdir, self.lndir, name)

    @property
    def source_path(self) -> Path:
        """Physical service definition, ``svdir/name``."""
        return self.svdir / self.name

    @property
    def target_path(self) -> Path:
        """Activation symlink, ``lndir/name``."""
        return self.lndir / self.name

    def make_path(self, relative: str) -> Path:
        """Path of a supervisor file below the target path."""
        return self.target_path / relative

    def target_exists(self) -> bool:
        """Whether anything (including a dangling symlink) occupies the target path."""
        return os.path.lexists(self.target_path)

    def points_here(self) -> bool:
        """Whether the target symlink refers to this service's source path.

        Raises:
            InspectFailed: If the link cannot be read
        """
        try:
            link = Path(os.readlink(self.target_path))
        except OSError as e:
            raise InspectFailed(self.target_path, e) from e
        if link == self.source_path:
            return True
        if not link.is_absolute():
            link = self.lndir / link
        return os.path.realpath(link) == os.path.realpath(self.source_path)

    def activation_state(self) -> ActivationState:
        """Inspect the target path without following it.

        Raises:
            InspectFailed: If ``lstat`` fails for any reason other than a missing target
        """
        try:
            mode = os.lstat(self.target_path).st_mode
        except FileNotFoundError:
            return ActivationState.DISABLED
        except OSError as e:
            raise InspectFailed(self.target_path, e) from e
        if stat.S_ISLNK(mode):
            return ActivationState.ENABLED_HERE if self.points_here() else ActivationState.MISMATCH
        return ActivationState.BLOCKED
