"""Job lifecycle package.

Module split:
    - `submitter`: task creation (`JobSubmitter.submit`).
    - `poller`: status polling until a terminal status (`StatusPoller`).
    - `resolver`: media id and download URL lookup (`ResultResolver`).
    - `cancellation`: external cancellation signal for polling waits.
"""

from pixai.jobs.cancellation import CancellationToken
from pixai.jobs.poller import PollPolicy, StatusPoller
from pixai.jobs.resolver import ResultResolver
from pixai.jobs.submitter import JobSubmitter

__all__ = [
    "CancellationToken",
    "JobSubmitter",
    "PollPolicy",
    "ResultResolver",
    "StatusPoller",
]
