"""Enable a service by linking its definition into the active directory."""

import logging
import os

from .ActivationState import ActivationState
from .Service import Service
from .ServiceError import AlreadyEnabled, IsDirectory, IsFile, LinkFailed, Mismatch, SourceMissing

logger = logging.getLogger(__name__)


def enable(service: Service) -> None:
    """Create the symlink ``target_path -> source_path``.

    The target is inspected with ``lstat`` so an existing link is never
    followed. The check and the link are not atomic; a racing enable of the
    same name is rejected by ``symlink(2)`` itself and reported as
    ``LinkFailed``.

    Raises:
        SourceMissing: If the service definition does not exist
        IsDirectory: If the target path is a plain directory
        IsFile: If the target path is a regular file
        AlreadyEnabled: If the target already links to this service
        Mismatch: If the target links somewhere else
        LinkFailed: If the symlink could not be created
    """
    source = service.source_path
    target = service.target_path

    if not source.exists():
        raise SourceMissing(service.name, source)

    state = service.activation_state()
    if state is ActivationState.ENABLED_HERE:
        raise AlreadyEnabled(service.name)
    if state is ActivationState.MISMATCH:
        raise Mismatch(target, service.name)
    if state is ActivationState.BLOCKED:
        if target.is_dir():
            raise IsDirectory(target)
        if target.is_file():
            raise IsFile(target)
        # Sockets, fifos and the like fall through; symlink() reports EEXIST

    try:
        os.symlink(source, target)
    except OSError as e:
        raise LinkFailed(source, target, e) from e

    logger.info("Enabled %s (%s -> %s)", service.name, target, source)
