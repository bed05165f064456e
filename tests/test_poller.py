import threading
import time
from unittest import mock

import pytest

from pixai.errors import MalformedResponse, OperationCancelled, PollingFailed, TimedOut, TransportError
from pixai.jobs import CancellationToken, PollPolicy, StatusPoller
from pixai.models import JobStatus


def test_polls_until_completed(transport, token):
    transport.queue_statuses("submitted", "running", "running", "completed")

    status = StatusPoller(transport).await_terminal("T1", cancel_token=token)

    assert status is JobStatus.COMPLETED
    assert len(transport.calls_for("status")) == 4
    assert token.waits == [5.0, 5.0, 5.0]
    assert transport.calls_for("status")[0] == {"id": "T1"}


@pytest.mark.parametrize("final", ["failed", "cancelled"])
def test_returns_other_terminal_statuses(transport, token, final):
    transport.queue_statuses("running", final)

    status = StatusPoller(transport).await_terminal("T1", cancel_token=token)

    assert status is JobStatus(final)
    assert len(token.waits) == 1


def test_unknown_status_keeps_polling(transport, token):
    transport.queue_statuses("waiting", "completed")

    assert StatusPoller(transport).await_terminal("T1", cancel_token=token) is JobStatus.COMPLETED
    assert len(token.waits) == 1


def test_interval_comes_from_policy(transport, token):
    transport.queue_statuses("running", "completed")

    StatusPoller(transport, PollPolicy(interval=0.5)).await_terminal("T1", cancel_token=token)

    assert token.waits == [0.5]


def test_transport_error_aborts_without_retry(transport, token):
    transport.queue_statuses("running")
    transport.queue("status", TransportError("boom"))

    with pytest.raises(PollingFailed) as excinfo:
        StatusPoller(transport).await_terminal("T1", cancel_token=token)

    assert excinfo.value.job_id == "T1"
    assert len(transport.calls_for("status")) == 2


def test_missing_status_is_malformed(transport, token):
    transport.queue("status", {"task": {"id": "T1"}})

    with pytest.raises(MalformedResponse):
        StatusPoller(transport).await_terminal("T1", cancel_token=token)


def test_max_attempts_raises_timed_out(transport, token):
    transport.queue_statuses("running", "running", "running")

    with pytest.raises(TimedOut):
        StatusPoller(transport, PollPolicy(max_attempts=3)).await_terminal("T1", cancel_token=token)

    assert len(transport.calls_for("status")) == 3
    assert len(token.waits) == 2


def test_timeout_raises_timed_out(transport, token):
    transport.queue_statuses("running", "running", "running")
    clock = mock.Mock(side_effect=[0.0, 1.0, 9.0, 12.0])
    poller = StatusPoller(transport, PollPolicy(interval=5.0, timeout=10.0), clock=clock)

    with pytest.raises(TimedOut):
        poller.await_terminal("T1", cancel_token=token)

    assert token.waits == [5.0, 1.0]


def test_cancel_during_wait_raises_operation_cancelled(transport, token):
    token.cancel_on_wait = 2
    transport.queue_statuses("running", "running", "running")

    with pytest.raises(OperationCancelled):
        StatusPoller(transport).await_terminal("T1", cancel_token=token)

    assert len(transport.calls_for("status")) == 2


def test_cancel_from_other_thread_wakes_wait_promptly(transport):
    transport.queue_statuses("running", "running")
    token = CancellationToken()
    timer = threading.Timer(0.1, token.cancel)
    poller = StatusPoller(transport, PollPolicy(interval=30.0))

    started = time.monotonic()
    timer.start()
    try:
        with pytest.raises(OperationCancelled):
            poller.await_terminal("T1", cancel_token=token)
    finally:
        timer.cancel()

    assert time.monotonic() - started < 5.0
    assert len(transport.calls_for("status")) == 1


def test_keyboard_interrupt_during_wait_is_not_swallowed():
    token = CancellationToken()

    with mock.patch.object(token._event, "wait", side_effect=KeyboardInterrupt):
        with pytest.raises(OperationCancelled) as excinfo:
            token.wait(5.0, job_id="T1")

    assert token.cancelled
    assert excinfo.value.job_id == "T1"
    assert isinstance(excinfo.value.__cause__, KeyboardInterrupt)
