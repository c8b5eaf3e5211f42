"""
Ingestion workflow: health check, load, clean, configure, upload, wait, stats.
Any failure before the stats step is fatal and raises IngestionError.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from catalog.config import Settings
from catalog.core.errors import IngestionError, TaskPollError
from catalog.ingestion.cleaner import clean_records
from catalog.ingestion.loader import load_records
from catalog.ingestion.poller import PollResult, TaskPoller
from catalog.ingestion.uploader import BatchUploader, UploadResult
from catalog.search.index import SearchIndex, SearchServiceError
from catalog.search.models import IndexStats, SearchQuery

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    documents_loaded: int
    upload: UploadResult
    polls: list[PollResult] = field(default_factory=list)
    stats: IndexStats | None = None


async def _wait(poller: TaskPoller, task_uid: int) -> PollResult:
    result = await poller.poll(task_uid)
    if not result.ok:
        raise TaskPollError(task_uid, result.state.value, result.error)
    return result


async def run_ingestion(
    index: SearchIndex,
    settings: Settings,
    records: list[dict[str, Any]] | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> IngestionReport:
    """Load ``settings.data_file`` (unless ``records`` is given) into the index."""
    try:
        await index.health()
    except SearchServiceError as e:
        raise IngestionError(f"Failed to connect to search service: {e}") from e
    logger.info("Connected to search service")

    if records is None:
        records = load_records(settings.data_file)
    records = clean_records(records)

    poller = TaskPoller(
        index,
        interval=settings.poll_interval_seconds,
        timeout=settings.poll_timeout_seconds,
        sleep=sleep,
    )

    if settings.filterable_attributes:
        try:
            settings_task = await index.update_filterable_attributes(settings.filterable_attributes)
        except SearchServiceError as e:
            raise IngestionError(f"Failed to set filterable attributes: {e}") from e
        await _wait(poller, settings_task.task_uid)

    uploader = BatchUploader(
        index,
        batch_size=settings.batch_size,
        pause=settings.batch_pause_seconds,
        primary_key=settings.primary_key,
        sleep=sleep,
    )
    upload = await uploader.upload(records)
    report = IngestionReport(documents_loaded=len(records), upload=upload)

    # Meilisearch may process tasks out of order, so the last task alone does not imply the rest
    if settings.wait_for_all_tasks:
        pending = list(upload.task_uids)
    else:
        pending = [upload.last_task_uid] if upload.last_task_uid is not None else []
    for task_uid in pending:
        report.polls.append(await _wait(poller, task_uid))
    if pending:
        logger.info("Indexing complete (%d tasks)", len(pending))

    try:
        report.stats = await index.get_stats()
        logger.info("Index stats: %d documents indexed", report.stats.number_of_documents)
    except SearchServiceError as e:
        logger.warning("Could not get index stats: %s", e)

    return report


async def run_smoke_searches(index: SearchIndex, queries: list[str], limit: int = 5) -> dict[str, int]:
    """Run a few searches after ingestion and log what came back. Returns hit counts."""
    counts: dict[str, int] = {}
    for q in queries:
        try:
            result = await index.search(SearchQuery(q=q, limit=limit))
        except SearchServiceError as e:
            logger.error("Search for %r failed: %s", q, e)
            continue
        counts[q] = len(result.hits)
        first = result.hits[0].get("name") if result.hits else None
        logger.info("Found %d results for %r (first: %s)", len(result.hits), q, first)
    return counts
