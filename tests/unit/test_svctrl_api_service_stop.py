"""Unit tests for svctrl.api.service.stop."""

import pytest

from svctrl.api.service.RetryPolicy import RetryPolicy
from svctrl.api.service.ServiceError import CouldNotDisable, NotEnabled, OpenFailed, ReadFailed
from svctrl.api.service.stop import stop
from tests.conftest import make_supervise

NO_DELAY = RetryPolicy(max_attempts=5, interval_secs=0)

pytestmark = pytest.mark.timeout(10)


class RecordingSleep:
    def __init__(self, on_call=None):
        self.calls: list[float] = []
        self.on_call = on_call

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.on_call:
            self.on_call()


def test_stop_confirmed_on_first_poll_does_not_sleep(enabled_service):
    make_supervise(enabled_service.source_path, stat="down\n")
    sleep = RecordingSleep()

    stop(enabled_service, policy=RetryPolicy(), sleep=sleep)

    assert sleep.calls == []
    assert (enabled_service.source_path / "supervise" / "control").read_text() == "d"


def test_stop_polls_until_down(enabled_service):
    stat = enabled_service.source_path / "supervise" / "stat"
    sleep = RecordingSleep(on_call=lambda: stat.write_text("down\n"))

    stop(enabled_service, policy=RetryPolicy(max_attempts=5, interval_secs=0.5), sleep=sleep)

    assert sleep.calls == [0.5]


def test_stop_gives_up_after_max_attempts(enabled_service):
    sleep = RecordingSleep()

    with pytest.raises(CouldNotDisable) as exc_info:
        stop(enabled_service, policy=NO_DELAY, sleep=sleep)

    assert exc_info.value.name == "test"
    # No sleep after the final attempt
    assert len(sleep.calls) == NO_DELAY.max_attempts - 1


def test_stop_requires_exact_down_literal(enabled_service):
    make_supervise(enabled_service.source_path, stat="down")
    with pytest.raises(CouldNotDisable):
        stop(enabled_service, policy=NO_DELAY, sleep=RecordingSleep())


def test_stop_not_enabled(service):
    with pytest.raises(NotEnabled):
        stop(service, policy=NO_DELAY, sleep=RecordingSleep())


def test_stop_without_supervisor_cannot_disable(service):
    service.target_path.symlink_to(service.source_path)
    sleep = RecordingSleep()

    with pytest.raises(CouldNotDisable) as exc_info:
        stop(service, policy=NO_DELAY, sleep=sleep)

    assert isinstance(exc_info.value.cause, OpenFailed)
    assert sleep.calls == []


def test_stop_unreadable_stat_counts_as_unconfirmed(enabled_service):
    (enabled_service.source_path / "supervise" / "stat").unlink()

    with pytest.raises(CouldNotDisable) as exc_info:
        stop(enabled_service, policy=RetryPolicy(max_attempts=2, interval_secs=0), sleep=RecordingSleep())

    assert isinstance(exc_info.value.cause, ReadFailed)


@pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"interval_secs": -1}])
def test_retry_policy_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        RetryPolicy(**kwargs)
