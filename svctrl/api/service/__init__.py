"""Service module - lifecycle, control channel and status of runit services."""

from .ActivationState import ActivationState
from .CONTROL_COMMANDS import CONTROL_COMMANDS
from .RetryPolicy import DEFAULT_RETRY_POLICY, RetryPolicy
from .RunStatus import RunStatus
from .Service import Service
from .ServiceError import (
    AlreadyEnabled,
    ClockSkew,
    ConfigDirMissing,
    CouldNotDisable,
    Disabled,
    InspectFailed,
    InvalidName,
    InvalidPid,
    IsDirectory,
    IsFile,
    LinkFailed,
    Mismatch,
    NotEnabled,
    OpenFailed,
    ReadFailed,
    RemoveFailed,
    ServiceError,
    SourceMissing,
    StatMtimeFailed,
    WriteFailed,
)

__all__ = [
    "ActivationState",
    "AlreadyEnabled",
    "CONTROL_COMMANDS",
    "ClockSkew",
    "ConfigDirMissing",
    "CouldNotDisable",
    "DEFAULT_RETRY_POLICY",
    "Disabled",
    "InspectFailed",
    "InvalidName",
    "InvalidPid",
    "IsDirectory",
    "IsFile",
    "LinkFailed",
    "Mismatch",
    "NotEnabled",
    "OpenFailed",
    "ReadFailed",
    "RemoveFailed",
    "RetryPolicy",
    "RunStatus",
    "Service",
    "ServiceError",
    "SourceMissing",
    "StatMtimeFailed",
    "WriteFailed",
]
