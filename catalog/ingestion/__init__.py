"""
Bulk ingestion of product records into the search index.

    records = clean_records(load_records("sku.json"))
    result = await BatchUploader(index).upload(records)
    outcome = await TaskPoller(index).poll(result.last_task_uid)
"""

from catalog.ingestion.cleaner import clean_records
from catalog.ingestion.loader import load_records
from catalog.ingestion.pipeline import IngestionReport, run_ingestion
from catalog.ingestion.poller import PollResult, PollState, TaskPoller
from catalog.ingestion.uploader import BatchUploader, UploadResult, iter_batches

__all__ = [
    "BatchUploader",
    "IngestionReport",
    "PollResult",
    "PollState",
    "TaskPoller",
    "UploadResult",
    "clean_records",
    "iter_batches",
    "load_records",
    "run_ingestion",
]
