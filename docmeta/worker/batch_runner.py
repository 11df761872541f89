import threading
import time
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from pathlib import Path

from docmeta.analysis.models import DocumentMetadata
from docmeta.config.settings import Settings
from docmeta.logging.logger import Log
from docmeta.processor.processor import Processor
from docmeta.worker.models import BatchReport, DocumentFailure


@dataclass
class _Task:
    path: Path
    started: threading.Event = field(default_factory=threading.Event)
    started_at: float = 0.0


class BatchRunner:
    """Process many documents on a thread pool, one task per document.

    A failing or timed-out document is reported and never aborts the rest
    of the batch. The timeout is measured from the moment a document starts
    processing, so time spent queued behind other documents does not count.
    Timed-out work is not interrupted; its result is dropped.
    """

    def __init__(self, processor: Processor, settings: Settings) -> None:
        self._processor = processor
        self._settings = settings

    def run(self, paths: Sequence[Path]) -> BatchReport:
        """Process every path and collect results in input order."""
        Log.info(f"Batch started: {len(paths)} documents", workers=self._max_workers)
        report = BatchReport()
        executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="docmeta"
        )
        try:
            tasks = [_Task(path=path) for path in paths]
            futures = [(task, executor.submit(self._process, task)) for task in tasks]
            for task, future in futures:
                self._collect(task, future, report)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        Log.info(
            "Batch finished",
            succeeded=len(report.succeeded),
            failed=len(report.failed),
        )
        return report

    @property
    def _max_workers(self) -> int:
        return max(self._settings.max_workers, 1)

    @property
    def _timeout(self) -> float | None:
        timeout = self._settings.analysis_timeout_seconds
        return timeout if timeout > 0 else None

    def _process(self, task: _Task) -> DocumentMetadata:
        task.started_at = time.monotonic()
        task.started.set()
        return self._processor.process(task.path)

    def _remaining(self, task: _Task) -> float | None:
        """Seconds left for a started task; None when no timeout applies."""
        if self._timeout is None:
            return None
        task.started.wait()
        return max(0.0, task.started_at + self._timeout - time.monotonic())

    def _collect(
        self,
        task: _Task,
        future: "Future[DocumentMetadata]",
        report: BatchReport,
    ) -> None:
        try:
            report.succeeded.append(future.result(timeout=self._remaining(task)))
        except FutureTimeoutError:
            future.cancel()
            Log.warning(f"Timed out after {self._timeout}s, result discarded: {task.path}")
            report.failed.append(DocumentFailure(path=task.path, error="timed out"))
        except Exception as exc:
            Log.error(f"Document {task.path} failed: {exc}")
            report.failed.append(
                DocumentFailure(path=task.path, error=str(exc) or type(exc).__name__)
            )
