from collections import defaultdict, deque

import pytest

from pixai.jobs import CancellationToken
from pixai.transport import queries


QUERY_NAMES = {
    queries.CREATE_GENERATION_TASK: "create",
    queries.TASK_STATUS: "status",
    queries.TASK_OUTPUTS: "outputs",
    queries.MEDIA_URLS: "media",
}


class FakeTransport:
    """In-memory stand-in for `GraphQLTransport`.

    Results are queued per logical query and consumed in order; queued
    exceptions are raised instead of returned.
    """

    def __init__(self):
        self.calls = []
        self.downloads = []
        self._results = defaultdict(deque)
        self.files = {}

    def queue(self, name, *results):
        self._results[name].extend(results)
        return self

    def queue_statuses(self, *statuses):
        return self.queue("status", *({"task": {"id": "T1", "status": s}} for s in statuses))

    def calls_for(self, name):
        return [variables for query, variables in self.calls if QUERY_NAMES[query] == name]

    def execute(self, query, variables):
        self.calls.append((query, variables))
        result = self._results[QUERY_NAMES[query]].popleft()
        if isinstance(result, Exception):
            raise result
        return result

    def download(self, url):
        self.downloads.append(url)
        result = self.files[url]
        if isinstance(result, Exception):
            raise result
        return result


class RecordingToken(CancellationToken):
    """Cancellation token that records waits instead of sleeping."""

    def __init__(self, cancel_on_wait=None):
        super().__init__()
        self.waits = []
        self.cancel_on_wait = cancel_on_wait

    def wait(self, seconds, job_id=None):
        self.waits.append(seconds)
        if self.cancel_on_wait is not None and len(self.waits) >= self.cancel_on_wait:
            self.cancel("cancelled in test")
        self.raise_if_cancelled(job_id)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def token():
    return RecordingToken()
