"""
Search index abstraction used by ingestion and the product service.
Implemented by MeilisearchClient and by the test double in tests/fakes.py.
"""

from typing import Any, Protocol

from catalog.search.models import IndexStats, SearchQuery, SearchResult, Task, TaskInfo

Record = dict[str, Any]


class SearchServiceError(Exception):
    """The search service rejected a request."""

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [self.message]
        if self.code:
            parts.append(f"code={self.code}")
        if self.status_code:
            parts.append(f"status={self.status_code}")
        return " ".join(parts)


class SearchServiceUnavailable(SearchServiceError):
    """The search service could not be reached (network error, timeout)."""


class SearchIndex(Protocol):
    async def add_documents(self, documents: list[Record], primary_key: str = "id") -> TaskInfo: ...

    async def search(self, query: SearchQuery) -> SearchResult: ...

    async def get_stats(self) -> IndexStats: ...

    async def get_task(self, task_uid: int) -> Task: ...

    async def update_filterable_attributes(self, attributes: list[str]) -> TaskInfo: ...

    async def health(self) -> dict[str, Any]: ...

    async def aclose(self) -> None: ...
