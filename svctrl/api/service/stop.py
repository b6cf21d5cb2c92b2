"""Bring a service down and wait until the supervisor confirms it."""

import logging
import time
from collections.abc import Callable

from .CONTROL_COMMANDS import CONTROL_COMMANDS, DOWN_STATE, STAT_FILE
from .RetryPolicy import DEFAULT_RETRY_POLICY, RetryPolicy
from .Service import Service
from .ServiceError import CouldNotDisable, NotEnabled, OpenFailed, ReadFailed, WriteFailed
from .read_state import read_state
from .signal import signal

logger = logging.getLogger(__name__)


def stop(
    service: Service,
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Send the down command and poll ``supervise/stat`` until it reads ``down``.

    ``supervise/stat`` is read up to ``policy.max_attempts`` times with
    ``policy.interval_secs`` between reads. A read failure counts as an
    unconfirmed attempt.

    Raises:
        NotEnabled: If the target path does not exist
        CouldNotDisable: If the down command could not be delivered, or the
            service was not confirmed down within the retry budget
    """
    if not service.target_exists():
        raise NotEnabled(service.name)

    try:
        signal(service, CONTROL_COMMANDS["down"])
    except (OpenFailed, WriteFailed) as e:
        raise CouldNotDisable(service.name, e) from e

    stat_path = service.make_path(STAT_FILE)
    last_error: ReadFailed | None = None
    for attempt in range(1, policy.max_attempts + 1):
        try:
            if read_state(stat_path) == DOWN_STATE:
                logger.info("%s confirmed down after %d attempt(s)", service.name, attempt)
                return
        except ReadFailed as e:
            last_error = e
            logger.warning("Attempt %d: %s", attempt, e)
        if attempt < policy.max_attempts:
            sleep(policy.interval_secs)

    logger.warning("%s not confirmed down after %d attempt(s)", service.name, policy.max_attempts)
    raise CouldNotDisable(service.name, last_error)
