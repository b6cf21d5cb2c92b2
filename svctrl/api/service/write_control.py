"""Write a single control character to a supervisor's control pipe."""

import logging
import os
from pathlib import Path

from .CONTROL_COMMANDS import CONTROL_FILE
from .ServiceError import OpenFailed, WriteFailed

logger = logging.getLogger(__name__)


def write_control(target_path: Path, command: str) -> None:
    """Write ``command`` to ``target_path/supervise/control``.

    The pipe is opened non-blocking, so a supervisor that is not listening
    surfaces as ``OpenFailed`` (ENXIO) instead of hanging. Delivery is
    fire-and-forget: nothing confirms the supervisor acted on the byte.

    Raises:
        OpenFailed: If the control pipe cannot be opened for writing
        WriteFailed: If the character could not be written
    """
    control = Path(target_path) / CONTROL_FILE
    try:
        fd = os.open(control, os.O_WRONLY | os.O_NONBLOCK)
    except OSError as e:
        raise OpenFailed(control, e) from e

    try:
        data = command.encode()
        written = os.write(fd, data)
        if written != len(data):
            raise OSError(f"short write ({written} of {len(data)} bytes)")
    except OSError as e:
        raise WriteFailed(control, e) from e
    finally:
        os.close(fd)

    logger.info("Wrote %r to %s", command, control)
