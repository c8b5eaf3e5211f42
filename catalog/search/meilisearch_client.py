"""
Meilisearch client - typed access to the index through meilisearch-python-sdk.
Challenge: One explicit surface (documents, search, stats, tasks) instead of ad hoc casts.
Design: Shared async client per process; SDK errors surface as SearchServiceError.
"""

import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

import httpx
from meilisearch_python_sdk import AsyncClient
from meilisearch_python_sdk.errors import (
    MeilisearchApiError,
    MeilisearchCommunicationError,
    MeilisearchError,
    MeilisearchTimeoutError,
)

from catalog.config import get_settings
from catalog.search.index import Record, SearchServiceError, SearchServiceUnavailable
from catalog.search.models import IndexStats, SearchQuery, SearchResult, Task, TaskInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MeilisearchClient:
    """Client bound to a single index. Every call is one request, never retried."""

    def __init__(
        self,
        base_url: str,
        index_uid: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        sdk_client: AsyncClient | None = None,
    ):
        self.index_uid = index_uid
        self._sdk = sdk_client or AsyncClient(base_url.rstrip("/"), api_key, timeout=timeout)
        self._index = self._sdk.index(index_uid)

    async def _call(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await awaitable
        except (MeilisearchCommunicationError, MeilisearchTimeoutError, httpx.HTTPError) as e:
            raise SearchServiceUnavailable(f"{operation} failed: {_message(e)}") from e
        except MeilisearchApiError as e:
            raise SearchServiceError(
                _message(e),
                code=getattr(e, "code", None) or None,
                status_code=getattr(e, "status_code", None),
            ) from e
        except MeilisearchError as e:
            raise SearchServiceError(f"{operation} failed: {_message(e)}") from e

    async def add_documents(self, documents: list[Record], primary_key: str = "id") -> TaskInfo:
        info = await self._call("add documents", self._index.add_documents(documents, primary_key=primary_key))
        return _task_info(info)

    async def search(self, query: SearchQuery) -> SearchResult:
        result = await self._call(
            "search",
            self._index.search(query.q, offset=query.offset, limit=query.limit, filter=query.filter),
        )
        return SearchResult(
            hits=result.hits,
            estimated_total_hits=result.estimated_total_hits,
            processing_time_ms=result.processing_time_ms,
        )

    async def get_stats(self) -> IndexStats:
        stats = await self._call("get stats", self._index.get_stats())
        return IndexStats(number_of_documents=stats.number_of_documents, is_indexing=stats.is_indexing)

    async def get_task(self, task_uid: int) -> Task:
        task = await self._call(f"get task {task_uid}", self._sdk.get_task(task_uid))
        return Task(
            uid=task.uid,
            index_uid=task.index_uid,
            status=task.status,
            type=getattr(task, "task_type", None),
            error=task.error,
        )

    async def update_filterable_attributes(self, attributes: list[str]) -> TaskInfo:
        info = await self._call(
            "update filterable attributes",
            self._index.update_filterable_attributes(attributes),
        )
        return _task_info(info)

    async def health(self) -> dict[str, Any]:
        health = await self._call("health check", self._sdk.health())
        return {"status": health.status}

    async def aclose(self) -> None:
        await self._sdk.aclose()


def _message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


def _task_info(info: Any) -> TaskInfo:
    return TaskInfo(
        task_uid=info.task_uid,
        index_uid=info.index_uid,
        status=info.status,
        type=getattr(info, "task_type", None),
    )


_client: MeilisearchClient | None = None


async def get_meilisearch() -> MeilisearchClient:
    """Get the shared Meilisearch client. Dependency injection for tests."""
    global _client
    if _client is None:
        settings = get_settings()
        logger.info("Connecting to Meilisearch at %s (index %r)", settings.meili_url, settings.index_name)
        _client = MeilisearchClient(
            settings.meili_url,
            settings.index_name,
            api_key=settings.master_key,
            timeout=settings.meili_timeout_seconds,
        )
    return _client


async def close_meilisearch() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
