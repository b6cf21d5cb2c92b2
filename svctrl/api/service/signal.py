"""Forward a control character to a running service's supervisor."""

from .Service import Service
from .ServiceError import NotEnabled
from .write_control import write_control


def signal(service: Service, command: str) -> None:
    """Write ``command`` to the service's control pipe.

    Any character is forwarded as-is; interpreting it is the supervisor's job.

    Raises:
        NotEnabled: If the target path does not exist
        OpenFailed: If the control pipe cannot be opened
        WriteFailed: If the write fails
    """
    if not service.target_exists():
        raise NotEnabled(service.name)
    write_control(service.target_path, command)
