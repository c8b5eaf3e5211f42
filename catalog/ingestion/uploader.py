"""
Batch uploader - submit records to the index in fixed-size batches.
Challenge: Avoid overwhelming the search service; fail fast on the first rejected batch.
"""

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from catalog.core.errors import BatchUploadError
from catalog.core.metrics import UPLOADED_BATCHES, UPLOADED_DOCUMENTS
from catalog.search.index import SearchIndex, SearchServiceError

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 1000
DEFAULT_PAUSE_SECONDS = 0.1


def iter_batches(records: Sequence[Any], size: int) -> Iterator[list[Any]]:
    """Contiguous slices of at most ``size`` records, in order."""
    if size <= 0:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(records), size):
        yield list(records[start:start + size])


@dataclass
class UploadResult:
    task_uids: list[int] = field(default_factory=list)
    batch_sizes: list[int] = field(default_factory=list)

    @property
    def last_task_uid(self) -> int | None:
        return self.task_uids[-1] if self.task_uids else None

    @property
    def documents(self) -> int:
        return sum(self.batch_sizes)


class BatchUploader:
    """Submits batches strictly one after another with a fixed pause in between."""

    def __init__(
        self,
        index: SearchIndex,
        batch_size: int = DEFAULT_BATCH_SIZE,
        pause: float = DEFAULT_PAUSE_SECONDS,
        primary_key: str = "id",
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if batch_size <= 0:
            raise ValueError(f"batch size must be positive, got {batch_size}")
        self.index = index
        self.batch_size = batch_size
        self.pause = pause
        self.primary_key = primary_key
        self._sleep = sleep

    async def upload(self, records: Sequence[dict[str, Any]]) -> UploadResult:
        result = UploadResult()
        total_batches = math.ceil(len(records) / self.batch_size)
        logger.info("Starting upload of %d documents in %d batches", len(records), total_batches)

        for number, batch in enumerate(iter_batches(records, self.batch_size), start=1):
            start = (number - 1) * self.batch_size
            logger.info("Uploading batch %d/%d (%d documents)", number, total_batches, len(batch))
            try:
                task = await self.index.add_documents(batch, primary_key=self.primary_key)
            except SearchServiceError as e:
                raise BatchUploadError(number, total_batches, start, start + len(batch), str(e)) from e

            result.task_uids.append(task.task_uid)
            result.batch_sizes.append(len(batch))
            UPLOADED_BATCHES.inc()
            UPLOADED_DOCUMENTS.inc(len(batch))
            logger.debug("Batch %d/%d enqueued as task %d", number, total_batches, task.task_uid)

            if number < total_batches:
                await self._sleep(self.pause)

        logger.info("All %d documents uploaded (%d tasks)", result.documents, len(result.task_uids))
        return result
