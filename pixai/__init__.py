"""PixAI asynchronous image-generation client.

Submits a generation task, polls it to a terminal status, resolves the produced
media to a download URL, and saves the image locally.

Typical use::

    from pixai import GraphQLTransport, PixAIClient

    with GraphQLTransport(api_key) as transport:
        client = PixAIClient(transport, output_dir="images")
        client.config_builder.set_width(768).set_height(1280)
        status = client.run("a cat")
"""

from pixai.core import PixAIClient
from pixai.errors import (
    DownloadFailed,
    GraphQLError,
    MalformedResponse,
    MissingOutput,
    NoDownloadUrl,
    OperationCancelled,
    PixAIError,
    PollingFailed,
    SubmissionFailed,
    TimedOut,
    TransportError,
    WriteFailed,
)
from pixai.jobs import CancellationToken, PollPolicy
from pixai.models import (
    GenerationConfig,
    GenerationConfigBuilder,
    JobStatus,
    RunResult,
)
from pixai.transport import GraphQLTransport

__all__ = [
    "CancellationToken",
    "DownloadFailed",
    "GenerationConfig",
    "GenerationConfigBuilder",
    "GraphQLError",
    "GraphQLTransport",
    "JobStatus",
    "MalformedResponse",
    "MissingOutput",
    "NoDownloadUrl",
    "OperationCancelled",
    "PixAIClient",
    "PixAIError",
    "PollPolicy",
    "PollingFailed",
    "RunResult",
    "SubmissionFailed",
    "TimedOut",
    "TransportError",
    "WriteFailed",
]
