"""End-to-end orchestration of one image-generation run.

Control flow:
    1. `JobSubmitter.submit` creates the task from a config snapshot + prompt.
    2. `StatusPoller.await_terminal` blocks until a terminal status.
    3. Only for `completed`: `ResultResolver.resolve_artifact` finds the image
       URL and `ArtifactFetcher.fetch` saves it.
    4. The terminal status is reported (logged and returned).

`failed` and `cancelled` end the run without resolving or downloading.

Error handling strategy:
    Component errors propagate unchanged; nothing is retried or downgraded to a
    warning. A run therefore ends in exactly one of: `completed` with a saved
    file, `failed`/`cancelled` without a download, or a raised `PixAIError`.

State:
    The client keeps the transport handle, output directory, and a config
    builder. The builder's snapshot is taken at submission time, so setter calls
    made after a run starts never affect it.
"""

import logging

from pixai import settings
from pixai.artifacts import ArtifactFetcher
from pixai.jobs import JobSubmitter, PollPolicy, ResultResolver, StatusPoller
from pixai.models import GenerationConfigBuilder, JobStatus, RunResult

logger = logging.getLogger(__name__)


class PixAIClient:
    """Generate images through the PixAI task API.

    Args:
        transport: Object exposing `execute(query, variables)` and
            `download(url)`, normally a `GraphQLTransport`.
        output_dir: Directory for downloaded images (created when missing).
        service_name: Label used in saved file names.
        poll_policy: Polling cadence/bounds; defaults to the `PIXAI_POLL_*` settings.
        config: Initial `GenerationConfig` for the builder.
    """

    def __init__(
        self,
        transport,
        output_dir=None,
        service_name=None,
        poll_policy=None,
        config=None,
    ):
        self.transport = transport
        self.output_dir = settings.OUTPUT_DIR if output_dir is None else output_dir
        self.config_builder = GenerationConfigBuilder(config)

        self.submitter = JobSubmitter(transport)
        self.poller = StatusPoller(transport, poll_policy or PollPolicy.from_settings())
        self.resolver = ResultResolver(transport)
        self.fetcher = ArtifactFetcher(transport, service_name=service_name)

    def set_output_file_path(self, output_dir):
        self.output_dir = output_dir

    def generate(self, prompt: str, config=None, cancel_token=None) -> RunResult:
        """Run the full lifecycle and return status, job id, and saved path.

        Args:
            prompt: Text prompt.
            config: Optional `GenerationConfig` or mapping overriding the
                builder snapshot for this run only.
            cancel_token: Optional `CancellationToken` aborting the poll wait.
        """
        snapshot = self.config_builder.build() if config is None else config

        job_id = self.submitter.submit(snapshot, prompt)
        status = self.poller.await_terminal(job_id, cancel_token=cancel_token)
        logger.info("Task status: %s", status.value)

        if status is not JobStatus.COMPLETED:
            return RunResult(status=status, job_id=job_id)

        url = self.resolver.resolve_artifact(job_id)
        path = self.fetcher.fetch(url, self.output_dir, job_id=job_id)
        return RunResult(status=status, job_id=job_id, path=path)

    def run(self, prompt: str, config=None, cancel_token=None) -> JobStatus:
        """Run the full lifecycle and return the terminal job status."""
        return self.generate(prompt, config=config, cancel_token=cancel_token).status
