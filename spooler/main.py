"""
Console entry point for the print spooler.

Obtains the shared spooler twice, submits two sample batches concurrently
from worker threads, then processes the queue once through each reference.
"""

import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from spooler.constants import DEMO_FIRST_BATCH, DEMO_SECOND_BATCH
from spooler.core import get_print_spooler
from spooler.observability.logging import bind_context, clear_context, setup_logging
from spooler.observability.metrics import get_metrics_text
from spooler.types import PrintReport

logger = logging.getLogger(__name__)


async def run_async(
    batches: Sequence[Sequence[str]] = (DEMO_FIRST_BATCH, DEMO_SECOND_BATCH),
    output: TextIO | None = None,
) -> list[PrintReport]:
    """
    Submit each batch from its own thread, wait for all of them, then process.

    Args:
        batches: Batches to submit, one per spooler reference.
        output: Stream the spooler writes to. Defaults to stdout.

    Returns:
        One PrintReport per processing pass.
    """
    spoolers = [get_print_spooler() for _ in batches]
    # Copied into each worker thread by asyncio.to_thread
    bind_context(spooler_references=len(spoolers))
    try:
        logger.info(
            "spooler_references_acquired",
            extra={"same_instance": all(s is spoolers[0] for s in spoolers)},
        )

        await asyncio.gather(
            *(
                asyncio.to_thread(spooler.add_print_job, batch)
                for spooler, batch in zip(spoolers, batches)
            )
        )

        return [spooler.process_print_job(output) for spooler in spoolers]
    finally:
        clear_context()


def run() -> None:
    """Run the print spooler demo."""
    setup_logging()
    asyncio.run(run_async(output=sys.stdout))
    logger.debug("spooler_metrics", extra={"metrics": get_metrics_text()})


if __name__ == "__main__":
    run()
