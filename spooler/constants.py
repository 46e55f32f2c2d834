"""
Application constants.
Centralized location for all constant values used across the application.
"""

from enum import StrEnum


class ProcessMode(StrEnum):
    """
    How a processing pass treats the queue.

    - PEEK: report every queued document and leave the queue intact
    - DRAIN: report every queued document, then clear the queue
    """

    PEEK = "peek"
    DRAIN = "drain"


# Line written after every processing pass
COMPLETION_MARKER = "Instance Call Finished"

# Sample batches used by the console entry point
DEMO_FIRST_BATCH: tuple[str, ...] = ("PC1_doc1", "PC1_doc2", "PC1_doc3")
DEMO_SECOND_BATCH: tuple[str, ...] = ("PC2_doc4", "PC2_doc5", "PC2_doc6")

# Metrics names
METRIC_QUEUE_DEPTH = "spooler_queue_depth"
METRIC_DOCUMENTS_SUBMITTED = "documents_submitted_total"
METRIC_DOCUMENTS_PRINTED = "documents_printed_total"
METRIC_PRINT_RUNS = "print_runs_total"
METRIC_BATCH_SIZE = "print_batch_size"

# Trace span names
SPAN_ADD_PRINT_JOB = "add_print_job"
SPAN_PROCESS_PRINT_JOB = "process_print_job"
