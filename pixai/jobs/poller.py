"""Status polling for submitted generation tasks.

Processing flow:
    1. Query `task(id) { status }`.
    2. Return when the status is terminal (`completed`, `failed`, `cancelled`).
    3. Otherwise wait `PollPolicy.interval` seconds and repeat.

Bounds:
    With the default policy the loop is unbounded, relying on the service to
    reach a terminal state. `max_attempts` and `timeout` cap it and raise
    `TimedOut` when exhausted.

Error handling strategy:
    - A transport failure on any attempt aborts with `PollingFailed`; failed
      calls are never retried.
    - A missing status field raises `MalformedResponse`.
    - Waits go through a `CancellationToken`; cancellation or Ctrl-C during a
      wait raises `OperationCancelled`.

Performance characteristics:
    One network call per iteration; blocking waits between iterations.
"""

import logging
import time
from dataclasses import dataclass

from pixai import settings
from pixai.errors import MalformedResponse, PollingFailed, TimedOut, TransportError
from pixai.jobs.cancellation import CancellationToken
from pixai.jobs.responses import dig
from pixai.models import JobId, JobStatus
from pixai.transport import queries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollPolicy:
    """Polling cadence and optional bounds.

    Attributes:
        interval: Seconds between status queries.
        max_attempts: Maximum status queries, or `None` for no limit.
        timeout: Maximum seconds spent polling, or `None` for no limit.
    """

    interval: float = 5.0
    max_attempts: int | None = None
    timeout: float | None = None

    @classmethod
    def from_settings(cls) -> "PollPolicy":
        return cls(
            interval=settings.POLL_INTERVAL,
            max_attempts=settings.MAX_POLLS,
            timeout=settings.POLL_TIMEOUT,
        )


class StatusPoller:

    def __init__(self, transport, policy=None, clock=time.monotonic):
        self.transport = transport
        self.policy = policy or PollPolicy()
        self._clock = clock

    def fetch_status(self, job_id: JobId) -> JobStatus:
        query, variables = queries.task_status(job_id)
        try:
            data = self.transport.execute(query, variables)
        except TransportError as err:
            raise PollingFailed(
                f"Status query for task {job_id} failed: {err}", job_id=job_id
            ) from err

        status = dig(data, "task", "status", job_id=job_id)
        if not isinstance(status, str):
            raise MalformedResponse(f"Unusable task status: {status!r}", job_id=job_id)
        return JobStatus.parse(status)

    def await_terminal(self, job_id: JobId, cancel_token=None) -> JobStatus:
        """Block until the task reaches a terminal status and return it."""
        token = cancel_token or CancellationToken()
        policy = self.policy
        started = self._clock()
        attempts = 0

        while True:
            token.raise_if_cancelled(job_id)
            status = self.fetch_status(job_id)
            attempts += 1
            logger.debug("Task %s status %s (poll %d)", job_id, status.value, attempts)

            if status.is_terminal:
                return status

            if policy.max_attempts is not None and attempts >= policy.max_attempts:
                raise TimedOut(
                    f"Task {job_id} still {status.value} after {attempts} polls",
                    job_id=job_id,
                )

            delay = policy.interval
            if policy.timeout is not None:
                remaining = policy.timeout - (self._clock() - started)
                if remaining <= 0:
                    raise TimedOut(
                        f"Task {job_id} still {status.value} after {policy.timeout}s",
                        job_id=job_id,
                    )
                delay = min(delay, remaining)

            token.wait(delay, job_id=job_id)
