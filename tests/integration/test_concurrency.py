"""
Integration tests for batch atomicity under concurrent producers.
"""

import io
import threading

from spooler.constants import COMPLETION_MARKER
from spooler.core import PrintSpooler

THREAD_COUNT = 8
BATCH_SIZE = 200


def make_batch(producer: int) -> list[str]:
    return [f"t{producer}-{n}" for n in range(BATCH_SIZE)]


def producer_of(document: str) -> int:
    return int(document.split("-")[0][1:])


def assert_whole_batches(documents: list[str] | tuple[str, ...]) -> None:
    """Check the sequence is a concatenation of complete, ordered batches."""
    assert len(documents) % BATCH_SIZE == 0
    for start in range(0, len(documents), BATCH_SIZE):
        chunk = list(documents[start:start + BATCH_SIZE])
        assert chunk == make_batch(producer_of(chunk[0]))


def run_producers(spooler: PrintSpooler) -> None:
    barrier = threading.Barrier(THREAD_COUNT)

    def produce(producer: int):
        batch = make_batch(producer)
        barrier.wait()
        spooler.add_print_job(batch)

    threads = [
        threading.Thread(target=produce, args=(producer,))
        for producer in range(THREAD_COUNT)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


class TestConcurrentSubmission:
    """Tests for concurrent add_print_job calls."""

    def test_batches_never_interleave(self, spooler: PrintSpooler):
        """Test each producer's batch lands as one contiguous, ordered block."""
        run_producers(spooler)

        documents = spooler.pending_documents()

        assert len(documents) == THREAD_COUNT * BATCH_SIZE
        assert_whole_batches(documents)
        assert {producer_of(first) for first in documents[::BATCH_SIZE]} == set(
            range(THREAD_COUNT)
        )

    def test_processing_sees_whole_batches(self, spooler: PrintSpooler):
        """Test passes running alongside producers only observe complete batches."""
        reports = []
        stop = threading.Event()

        def process_repeatedly():
            while not stop.is_set():
                reports.append(spooler.process_print_job(io.StringIO()))

        processor = threading.Thread(target=process_repeatedly)
        processor.start()
        try:
            run_producers(spooler)
        finally:
            stop.set()
            processor.join()

        reports.append(spooler.process_print_job(io.StringIO()))
        for report in reports:
            assert_whole_batches(report.documents)
        assert len(reports[-1].documents) == THREAD_COUNT * BATCH_SIZE

    def test_output_lines_stay_contiguous(self, spooler: PrintSpooler):
        """Test concurrent passes writing to one stream do not interleave lines."""
        spooler.add_print_job(make_batch(0))
        output = io.StringIO()

        threads = [
            threading.Thread(target=spooler.process_print_job, args=(output,))
            for _ in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        expected_pass = make_batch(0) + [COMPLETION_MARKER]
        assert output.getvalue().splitlines() == expected_pass * 4
