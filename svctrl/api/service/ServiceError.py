"""Errors raised by service lifecycle, control channel and status operations.

Every failure is a dataclass carrying the offending name/path and, where an
OS call failed, the wrapped exception in ``cause``. ``describe()`` is the one
place a failure is rendered to text.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(eq=False)
class ServiceError(Exception):
    """Base class for all service errors."""

    @property
    def kind(self) -> str:
        """Name of the error variant (e.g. ``"AlreadyEnabled"``)."""
        return type(self).__name__

    def describe(self) -> str:
        return f"Service operation failed ({self.kind})"

    def __str__(self) -> str:
        return self.describe()


def _with_cause(message: str, cause: BaseException | None) -> str:
    if cause is None:
        return message
    return f"{message}: {cause}"


@dataclass(eq=False)
class ConfigDirMissing(ServiceError):
    directory: Path
    name: str

    def describe(self) -> str:
        return f"Path ({self.directory}) of service ({self.name}) needs to be a directory"


@dataclass(eq=False)
class InvalidName(ServiceError):
    name: str

    def describe(self) -> str:
        return f"Service name ({self.name!r}) must be a single path component"


@dataclass(eq=False)
class InspectFailed(ServiceError):
    target_path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to inspect {self.target_path}", self.cause)


@dataclass(eq=False)
class SourceMissing(ServiceError):
    name: str
    source_path: Path

    def describe(self) -> str:
        return f"Service ({self.name}) has no definition at {self.source_path}"


@dataclass(eq=False)
class AlreadyEnabled(ServiceError):
    name: str

    def describe(self) -> str:
        return f"Service ({self.name}) is already enabled"


@dataclass(eq=False)
class Mismatch(ServiceError):
    target_path: Path
    name: str

    def describe(self) -> str:
        return f"Path ({self.target_path}) of service ({self.name}) is claimed by another service"


@dataclass(eq=False)
class IsDirectory(ServiceError):
    target_path: Path

    def describe(self) -> str:
        return f"Path ({self.target_path}) is a directory"


@dataclass(eq=False)
class IsFile(ServiceError):
    target_path: Path

    def describe(self) -> str:
        return f"Path ({self.target_path}) is a file"


@dataclass(eq=False)
class LinkFailed(ServiceError):
    source_path: Path
    target_path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to link {self.target_path} -> {self.source_path}", self.cause)


@dataclass(eq=False)
class NotEnabled(ServiceError):
    name: str

    def describe(self) -> str:
        return f"Service ({self.name}) is not enabled"


@dataclass(eq=False)
class Disabled(ServiceError):
    name: str

    def describe(self) -> str:
        return f"Service ({self.name}) is disabled"


@dataclass(eq=False)
class CouldNotDisable(ServiceError):
    name: str
    cause: BaseException | None = None

    def describe(self) -> str:
        return _with_cause(f"Service ({self.name}) could not be confirmed down", self.cause)


@dataclass(eq=False)
class RemoveFailed(ServiceError):
    target_path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to remove {self.target_path}", self.cause)


@dataclass(eq=False)
class InvalidPid(ServiceError):
    path: Path
    content: str
    cause: ValueError

    def describe(self) -> str:
        return _with_cause(f"Invalid pid {self.content!r} in {self.path}", self.cause)


@dataclass(eq=False)
class StatMtimeFailed(ServiceError):
    path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to read modification time of {self.path}", self.cause)


@dataclass(eq=False)
class ClockSkew(ServiceError):
    path: Path
    skew_seconds: float

    def describe(self) -> str:
        return f"Modification time of {self.path} is {self.skew_seconds:.3f}s in the future"


@dataclass(eq=False)
class OpenFailed(ServiceError):
    path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to open {self.path}", self.cause)


@dataclass(eq=False)
class WriteFailed(ServiceError):
    path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to write to {self.path}", self.cause)


@dataclass(eq=False)
class ReadFailed(ServiceError):
    path: Path
    cause: OSError

    def describe(self) -> str:
        return _with_cause(f"Failed to read {self.path}", self.cause)
