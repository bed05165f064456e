"""Result resolution for completed jobs.

A completed task exposes `outputs.mediaId`; the media id is not downloadable
itself and is resolved to a list of URL variants. The first variant carrying a
`url` wins, in list order.

Failure handling:
    - No media id -> `MissingOutput`
    - No variant with a url -> `NoDownloadUrl`
    - `urls` present but not a list -> `MalformedResponse`
    - Transport errors propagate unchanged.
"""

import logging

from pixai.errors import MalformedResponse, MissingOutput, NoDownloadUrl
from pixai.jobs.responses import dig
from pixai.transport import queries

logger = logging.getLogger(__name__)


class ResultResolver:

    def __init__(self, transport):
        self.transport = transport

    def resolve_media_id(self, job_id) -> str:
        query, variables = queries.task_outputs(job_id)
        data = self.transport.execute(query, variables)

        outputs = dig(data, "task", job_id=job_id).get("outputs")
        media_id = outputs.get("mediaId") if isinstance(outputs, dict) else None
        if not media_id:
            raise MissingOutput(f"Task {job_id} has no mediaId in its outputs", job_id=job_id)
        return str(media_id)

    def resolve_media_url(self, media_id: str, job_id=None) -> str:
        query, variables = queries.media_urls(media_id)
        data = self.transport.execute(query, variables)

        urls = dig(data, "media", job_id=job_id).get("urls") or []
        if not isinstance(urls, list):
            raise MalformedResponse(f"Unusable url list for media {media_id}: {urls!r}", job_id=job_id)
        for entry in urls:
            if isinstance(entry, dict) and entry.get("url"):
                logger.debug("Media %s resolved to variant %s", media_id, entry.get("variant"))
                return entry["url"]

        raise NoDownloadUrl(f"Media {media_id} has no downloadable url", job_id=job_id)

    def resolve_artifact(self, job_id) -> str:
        """Return the download URL of a completed job's image."""
        media_id = self.resolve_media_id(job_id)
        return self.resolve_media_url(media_id, job_id=job_id)
