"""
Process-wide print spooler.

A single shared ``PrintSpooler`` owns an insertion-ordered queue of documents.
Producers on any thread append whole batches; a processing pass writes every
queued document followed by a completion marker. Two independent locks are used:
one guards lazy construction of the shared instance, the other guards the queue.
"""

import logging
import sys
import threading
from collections import deque
from collections.abc import Iterable
from typing import TextIO

from spooler.config import get_settings
from spooler.constants import SPAN_ADD_PRINT_JOB, SPAN_PROCESS_PRINT_JOB, ProcessMode
from spooler.core.exceptions import InvalidArgumentError
from spooler.observability.metrics import MetricsCollector, get_metrics
from spooler.observability.tracing import create_span
from spooler.types.report import PrintReport, SpoolerStatus

logger = logging.getLogger(__name__)


class PrintSpooler:
    """
    Thread-safe queue of documents waiting to be printed.

    Use ``get_print_spooler()`` for the shared process-wide instance. The class
    can also be constructed directly to hand a private spooler to a collaborator.
    """

    def __init__(
        self,
        drain_on_process: bool | None = None,
        completion_marker: str | None = None,
        metrics: MetricsCollector | None = None,
    ):
        """
        Initialize the spooler.

        Args:
            drain_on_process: Clear the queue after each processing pass.
                Defaults to the ``spooler_drain_on_process`` setting.
            completion_marker: Line written at the end of each pass.
            metrics: Metrics collector. Defaults to the process-wide collector.
        """
        settings = get_settings()

        if drain_on_process is None:
            drain_on_process = settings.spooler_drain_on_process
        self.drain_on_process = drain_on_process
        self.completion_marker = completion_marker or settings.spooler_completion_marker

        self._queue: deque[str] = deque()
        self._queue_lock = threading.Lock()
        self._documents_submitted = 0
        self._print_runs = 0
        self._metrics = metrics or get_metrics()

    @property
    def mode(self) -> ProcessMode:
        """Processing mode applied by ``process_print_job``."""
        return ProcessMode.DRAIN if self.drain_on_process else ProcessMode.PEEK

    def add_print_job(self, documents: Iterable[str] | None) -> None:
        """
        Append a batch of documents to the queue.

        The batch is appended as one unit: documents from concurrent callers never
        interleave within it, and its internal order is preserved.

        Args:
            documents: Documents to queue.

        Raises:
            InvalidArgumentError: If ``documents`` is None or a bare string.
        """
        if documents is None:
            raise InvalidArgumentError("documents")
        if isinstance(documents, (str, bytes)):
            raise InvalidArgumentError(
                "documents",
                "Argument 'documents' must be a collection of documents, not a single string",
            )

        # Materialise first so a lazy iterable never runs under the lock
        batch = list(documents)

        with create_span(SPAN_ADD_PRINT_JOB, batch_size=len(batch)):
            with self._queue_lock:
                self._queue.extend(batch)
                self._documents_submitted += len(batch)
                depth = len(self._queue)
                self._metrics.record_batch_submitted(len(batch), depth)

        logger.info(
            "print_jobs_added",
            extra={"batch_size": len(batch), "queue_size": depth},
        )

    def process_print_job(self, output: TextIO | None = None) -> PrintReport:
        """
        Write every queued document, in queue order, followed by the completion marker.

        The pass holds the queue lock throughout, so it never observes a partially
        appended batch. Unless the spooler drains on process, the queue is left
        intact and a later pass reports the same documents again.

        Args:
            output: Stream to write to. Defaults to ``sys.stdout``.

        Returns:
            PrintReport describing the documents written.
        """
        stream = output if output is not None else sys.stdout
        mode = self.mode

        with create_span(SPAN_PROCESS_PRINT_JOB, mode=mode.value):
            with self._queue_lock:
                documents = tuple(self._queue)
                for document in documents:
                    print(document, file=stream)
                print(self.completion_marker, file=stream)

                if mode is ProcessMode.DRAIN:
                    self._queue.clear()
                self._print_runs += 1
                depth = len(self._queue)
                self._metrics.record_print_run(mode, len(documents), depth)

        logger.info(
            "print_job_processed",
            extra={"printed": len(documents), "mode": mode.value, "queue_size": depth},
        )
        return PrintReport(documents=documents, mode=mode)

    def pending_documents(self) -> list[str]:
        """Return a copy of the queued documents in queue order."""
        with self._queue_lock:
            return list(self._queue)

    def get_status(self) -> SpoolerStatus:
        """Return a snapshot of the queue size and lifetime counters."""
        with self._queue_lock:
            return SpoolerStatus(
                queue_size=len(self._queue),
                documents_submitted=self._documents_submitted,
                print_runs=self._print_runs,
                drain_on_process=self.drain_on_process,
            )

    def __len__(self) -> int:
        with self._queue_lock:
            return len(self._queue)


# Global spooler instance
_print_spooler: PrintSpooler | None = None
_print_spooler_lock = threading.Lock()


def get_print_spooler() -> PrintSpooler:
    """
    Get the process-wide print spooler, creating it on first use.

    Concurrent first calls construct exactly one instance; every caller
    receives the same fully constructed object.

    Returns:
        PrintSpooler: The shared spooler instance.
    """
    global _print_spooler
    if _print_spooler is None:
        with _print_spooler_lock:
            if _print_spooler is None:
                _print_spooler = PrintSpooler()
                logger.info(
                    "print_spooler_created",
                    extra={"drain_on_process": _print_spooler.drain_on_process},
                )
    return _print_spooler
