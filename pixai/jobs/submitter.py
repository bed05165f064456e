"""Task creation for the PixAI job lifecycle.

Processing flow:
    1. Snapshot the caller's config into a fresh wire-parameter dict.
    2. Add the prompt under `prompts`.
    3. Send the `createGenerationTask` mutation.
    4. Return `data.createGenerationTask.id`.

Error handling strategy:
    - Transport failures are re-raised as `SubmissionFailed` with the original
      error chained.
    - A missing or non-string id raises `MalformedResponse`.

Side effects:
    One network call. The caller's config object is never mutated.
"""

import logging

from pixai.errors import MalformedResponse, SubmissionFailed, TransportError
from pixai.jobs.responses import dig
from pixai.models import GenerationConfig, JobId
from pixai.transport import queries

logger = logging.getLogger(__name__)


class JobSubmitter:

    def __init__(self, transport):
        self.transport = transport

    def submit(self, config, prompt: str) -> JobId:
        """Create a generation task and return its id.

        Args:
            config: `GenerationConfig`, a mapping of option names, or `None`
                for service defaults.
            prompt: Text prompt. Empty prompts are forwarded as-is.
        """
        parameters = GenerationConfig.coerce(config).to_parameters()
        parameters["prompts"] = prompt

        query, variables = queries.create_task(parameters)
        try:
            data = self.transport.execute(query, variables)
        except TransportError as err:
            raise SubmissionFailed(f"Task submission failed: {err}") from err

        job_id = dig(data, "createGenerationTask", "id")
        if isinstance(job_id, bool) or not isinstance(job_id, (str, int)) or job_id == "":
            raise MalformedResponse(f"Unusable task id in response: {job_id!r}")

        job_id = str(job_id)
        logger.info("Start generation (task %s)", job_id)
        return job_id
