"""Infer the run state of a service from its supervisor's pid file."""

import os
import time
from collections.abc import Callable

from .CONTROL_COMMANDS import LOG_DIR, PID_FILE
from .RunStatus import RunStatus
from .Service import Service
from .ServiceError import ClockSkew, Disabled, InvalidPid, StatMtimeFailed
from .read_state import read_state

_MAX_PID = 2**32 - 1


def _parse_pid(content: str) -> int:
    if not (content.isascii() and content.isdigit()):
        raise ValueError(f"invalid literal for an unsigned integer: {content!r}")
    pid = int(content)
    if not 0 <= pid <= _MAX_PID:
        raise ValueError(f"pid {pid} is not an unsigned 32-bit integer")
    return pid


def has_log_service(service: Service) -> bool:
    """Whether the service has a ``log`` sub-service directory."""
    return service.make_path(LOG_DIR).is_dir()


def status(service: Service, want_log: bool = False, clock: Callable[[], float] = time.time) -> RunStatus:
    """Read ``supervise/pid`` (or ``log/supervise/pid``) and its mtime.

    An empty pid file means the service is down. The elapsed time is wall
    clock now minus the pid file's mtime.

    Raises:
        Disabled: If the target path does not exist
        ReadFailed: If the pid file cannot be read
        InvalidPid: If the pid file holds something other than an unsigned integer
        StatMtimeFailed: If the pid file's mtime cannot be read
        ClockSkew: If the mtime lies in the future
    """
    if not service.target_exists():
        raise Disabled(service.name)

    pid_path = service.make_path(f"{LOG_DIR}/{PID_FILE}" if want_log else PID_FILE)
    content = read_state(pid_path).strip()

    if not content:
        running, pid = False, 0
    else:
        try:
            pid = _parse_pid(content)
        except ValueError as e:
            raise InvalidPid(pid_path, content, e) from e
        running = True

    try:
        mtime = os.stat(pid_path).st_mtime
    except OSError as e:
        raise StatMtimeFailed(pid_path, e) from e

    elapsed = clock() - mtime
    if elapsed < 0:
        raise ClockSkew(pid_path, -elapsed)

    return RunStatus(name=service.name, running=running, pid=pid, elapsed_seconds=int(elapsed))
