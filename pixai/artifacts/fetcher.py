"""Download generated images and persist them under the output directory.

File naming:
    `picture_<service>_<YYYYMMDD_HHMMSS>.png`, local time, second resolution.
    Files are opened in exclusive-create mode; when the name is taken (two
    downloads within the same second) `_1`, `_2`, ... is appended before the
    extension. Existing files are never overwritten; a file whose write fails
    is removed again.

Error handling strategy:
    - Transport failures -> `DownloadFailed`.
    - Directory creation or write failures -> `WriteFailed`.
"""

import logging
import os
from datetime import datetime
from pathlib import Path

from pixai import settings
from pixai.errors import DownloadFailed, TransportError, WriteFailed

logger = logging.getLogger(__name__)

MAX_NAME_SUFFIX = 1000


def build_filename(service: str, timestamp: datetime, suffix: int = 0) -> str:
    stamp = timestamp.strftime("%Y%m%d_%H%M%S")
    if suffix:
        return f"picture_{service}_{stamp}_{suffix}.png"
    return f"picture_{service}_{stamp}.png"


class ArtifactFetcher:

    def __init__(self, transport, service_name=None, now=datetime.now):
        self.transport = transport
        self.service_name = service_name or settings.SERVICE_NAME
        self._now = now

    def fetch(self, url: str, output_dir, job_id=None) -> Path:
        """Download `url` and write it to a new file in `output_dir`.

        Returns:
            Path of the written file.
        """
        try:
            content = self.transport.download(url)
        except TransportError as err:
            raise DownloadFailed(f"Image download failed: {err}", job_id=job_id) from err

        directory = Path(output_dir or ".")
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path = self._write_unique(directory, content)
        except OSError as err:
            raise WriteFailed(
                f"Could not save image in {directory}: {err}", job_id=job_id
            ) from err

        logger.info("Image downloaded: %s", path)
        return path

    def _write_unique(self, directory: Path, content: bytes) -> Path:
        timestamp = self._now()
        for suffix in range(MAX_NAME_SUFFIX):
            path = directory / build_filename(self.service_name, timestamp, suffix)
            try:
                f = open(path, "xb")
            except FileExistsError:
                continue
            try:
                with f:
                    f.write(content)
            except OSError:
                path.unlink(missing_ok=True)
                raise
            return path
        raise FileExistsError(
            f"No free file name for {build_filename(self.service_name, timestamp)}"
            f" after {MAX_NAME_SUFFIX} attempts in {os.fspath(directory)}"
        )
