"""External cancellation signal for blocking waits.

A `CancellationToken` wraps a `threading.Event`. The poller sleeps through
`wait()`, so a `cancel()` from another thread (or a signal handler) wakes it
immediately instead of after the full poll interval.
"""

import threading

from pixai.errors import OperationCancelled


class CancellationToken:

    def __init__(self):
        self._event = threading.Event()
        self.reason = None

    def cancel(self, reason="Operation cancelled"):
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, job_id=None):
        if self._event.is_set():
            raise OperationCancelled(self.reason, job_id=job_id)

    def wait(self, seconds: float, job_id=None):
        """Block for `seconds` unless cancelled first.

        Raises:
            OperationCancelled: token cancelled before or during the wait, or a
                `KeyboardInterrupt` arrived while blocked.
        """
        self.raise_if_cancelled(job_id)
        try:
            self._event.wait(seconds)
        except KeyboardInterrupt as err:
            self.cancel("Interrupted while waiting for job status")
            raise OperationCancelled(self.reason, job_id=job_id) from err
        self.raise_if_cancelled(job_id)
