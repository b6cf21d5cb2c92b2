"""Disable a service: stop it, then remove its activation symlink."""

import logging
import os
import time
from collections.abc import Callable

from .RetryPolicy import DEFAULT_RETRY_POLICY, RetryPolicy
from .Service import Service
from .ServiceError import Disabled, RemoveFailed
from .stop import stop

logger = logging.getLogger(__name__)


def disable(
    service: Service,
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Stop the service and unlink ``target_path``.

    The link is left in place when the stop cannot be confirmed, so a running
    process is never orphaned. ``source_path`` is never removed.

    Raises:
        Disabled: If the target path does not exist
        CouldNotDisable: Propagated from :func:`stop`
        RemoveFailed: If the target could not be unlinked
    """
    target = service.target_path
    if not service.target_exists():
        raise Disabled(service.name)

    stop(service, policy=policy, sleep=sleep)

    try:
        os.unlink(target)
    except OSError as e:
        raise RemoveFailed(target, e) from e

    logger.info("Disabled %s (removed %s)", service.name, target)
