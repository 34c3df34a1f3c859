import math
import time
from collections.abc import Sequence
from pathlib import Path

from docmeta.config.settings import Settings
from docmeta.logging.logger import Log
from docmeta.worker.job_runner import JobRunner
from docmeta.worker.models import DocumentResult


def pacing_delay_seconds(rate_limit_per_minute: int) -> float:
    """Delay between documents that keeps requests under the per-minute limit."""
    if rate_limit_per_minute <= 0:
        return 0.0
    return math.ceil(60_000 / rate_limit_per_minute) / 1000


class Worker:
    """Batch loop: run -> pace -> next, one document at a time."""

    def __init__(self, job_runner: JobRunner, settings: Settings) -> None:
        self._job_runner = job_runner
        self._settings = settings
        self._delay_seconds = pacing_delay_seconds(settings.rate_limit_per_minute)

    def run(
        self,
        paths: Sequence[Path],
        max_documents: int | None = None,
    ) -> list[DocumentResult]:
        """Process ``paths`` sequentially and return one result per processed document.

        If max_documents is set, stop after that many documents.
        """
        if max_documents is not None and max_documents < 0:
            raise ValueError(f"max_documents must not be negative, got {max_documents}")
        selected = list(paths if max_documents is None else paths[:max_documents])
        Log.info(f"Worker started, {len(selected)} documents queued")
        results: list[DocumentResult] = []
        try:
            for index, path in enumerate(selected):
                if index > 0 and self._delay_seconds > 0:
                    Log.debug(f"Sleeping {self._delay_seconds}s to respect rate limit")
                    time.sleep(self._delay_seconds)
                result = self._job_runner.run(path)
                results.append(result)
                if not result.succeeded and self._settings.stop_on_error:
                    Log.warning(f"Stopping batch after failure on {path.name}")
                    break
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

        succeeded = sum(1 for r in results if r.succeeded)
        Log.info(f"Worker finished: {succeeded}/{len(results)} documents succeeded")
        return results
