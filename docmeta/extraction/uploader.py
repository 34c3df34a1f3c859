"""Uploads processed files and waits for the remote service to finish with them."""

import time

from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.exceptions import (
    RemoteProcessingFailedError,
    RemoteProcessingTimeoutError,
)
from docmeta.extraction.models import UploadedFile
from docmeta.logging.logger import Log
from docmeta.processor.models import ProcessedFile

DEFAULT_POLL_INTERVAL_SECONDS = 3.0


class Uploader:
    """Transfers a ProcessedFile and blocks until its state is terminal.

    ``max_wait_seconds`` of 0 polls for as long as the service keeps
    reporting PROCESSING.
    """

    def __init__(
        self,
        client: BaseExtractionClient,
        *,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        max_wait_seconds: float = 0.0,
    ) -> None:
        self._client = client
        self._poll_interval_seconds = poll_interval_seconds
        self._max_wait_seconds = max_wait_seconds

    def upload(self, processed_file: ProcessedFile) -> UploadedFile:
        """Upload the file and return its handle once processing has finished.

        Every call creates a new remote file; retrying after a failure uploads
        again.

        Raises:
            RemoteProcessingFailedError: if the service reports FAILED.
            RemoteProcessingTimeoutError: if ``max_wait_seconds`` elapses first.
        """
        uploaded = self._client.upload_file(
            processed_file.file_path,
            display_name=processed_file.display_name,
            mime_type=processed_file.mime_type,
        )
        Log.info(f"Uploaded {processed_file.display_name} as {uploaded.name}")
        ready = self._wait_for_processing(uploaded.name)
        Log.info(f"File uploaded successfully: {processed_file.display_name}")
        return ready

    def _wait_for_processing(self, name: str) -> UploadedFile:
        started = time.monotonic()
        current = self._client.get_file(name)
        while current.is_processing:
            if self._deadline_passed(started):
                raise RemoteProcessingTimeoutError(
                    f"File {name} still processing after {self._max_wait_seconds}s"
                )
            Log.info(
                f"File {name} is still processing, "
                f"retrying in {self._poll_interval_seconds} seconds"
            )
            time.sleep(self._poll_interval_seconds)
            current = self._client.get_file(name)

        if current.is_failed:
            raise RemoteProcessingFailedError(f"File processing failed: {name}")
        return current

    def _deadline_passed(self, started: float) -> bool:
        if self._max_wait_seconds <= 0:
            return False
        return time.monotonic() - started >= self._max_wait_seconds
