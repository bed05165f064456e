"""Exception taxonomy for the PixAI job lifecycle.

Every failure aborts the current run and reaches the caller unmodified. Step-level
errors chain the underlying transport or OS error via `raise ... from err` and carry
the job id when one is known.
"""


class PixAIError(RuntimeError):
    """Base class for all client-side failures."""

    step = "request"

    def __init__(self, message, job_id=None):
        super().__init__(message)
        self.job_id = job_id


class TransportError(PixAIError):
    """Network-level failure or non-success HTTP response."""

    step = "transport"

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GraphQLError(TransportError):
    """Successful HTTP exchange whose body reports GraphQL `errors` and no data."""

    def __init__(self, message, errors=None, status_code=None):
        super().__init__(message, status_code=status_code)
        self.errors = errors or []


class MalformedResponse(PixAIError):
    """Expected field absent or of the wrong type in an otherwise successful response."""

    step = "response parsing"


class SubmissionFailed(PixAIError):
    step = "submission"


class PollingFailed(PixAIError):
    step = "polling"


class OperationCancelled(PixAIError):
    """Run aborted by an external cancellation signal (not a remote job status)."""

    step = "polling"


class TimedOut(PixAIError):
    """Configured polling bound exhausted before a terminal status was observed."""

    step = "polling"


class MissingOutput(PixAIError):
    step = "result resolution"


class NoDownloadUrl(PixAIError):
    step = "result resolution"


class DownloadFailed(PixAIError):
    step = "download"


class WriteFailed(PixAIError):
    step = "write"
