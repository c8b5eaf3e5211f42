from catalog.search.index import SearchIndex, SearchServiceError, SearchServiceUnavailable
from catalog.search.meilisearch_client import MeilisearchClient, close_meilisearch, get_meilisearch
from catalog.search.models import IndexStats, SearchQuery, SearchResult, Task, TaskInfo, TaskStatus

__all__ = [
    "IndexStats",
    "MeilisearchClient",
    "SearchIndex",
    "SearchQuery",
    "SearchResult",
    "SearchServiceError",
    "SearchServiceUnavailable",
    "Task",
    "TaskInfo",
    "TaskStatus",
    "close_meilisearch",
    "get_meilisearch",
]
