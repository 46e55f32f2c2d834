"""
Result and status types returned by the print spooler.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from spooler.constants import ProcessMode


@dataclass(frozen=True)
class PrintReport:
    """
    Outcome of one processing pass.
    Lists the documents that were written, in queue order.
    """

    documents: tuple[str, ...]
    mode: ProcessMode

    @property
    def drained(self) -> bool:
        """Check whether the pass cleared the queue."""
        return self.mode is ProcessMode.DRAIN

    def __len__(self) -> int:
        return len(self.documents)


class SpoolerStatus(BaseModel):
    """Point-in-time snapshot of a spooler's queue and counters."""

    queue_size: int
    documents_submitted: int
    print_runs: int
    drain_on_process: bool
