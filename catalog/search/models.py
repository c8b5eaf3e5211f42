"""Meilisearch wire models (camelCase on the wire, snake_case in Python)."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    ENQUEUED = "enqueued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.SUCCEEDED, TaskStatus.FAILED, TaskStatus.CANCELED)


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TaskError(_WireModel):
    message: str
    code: str | None = None
    type: str | None = None
    link: str | None = None


class TaskInfo(_WireModel):
    """Summary returned when Meilisearch enqueues an asynchronous operation."""

    task_uid: int = Field(alias="taskUid")
    index_uid: str | None = Field(default=None, alias="indexUid")
    status: TaskStatus = TaskStatus.ENQUEUED
    type: str | None = None


class Task(_WireModel):
    uid: int
    index_uid: str | None = Field(default=None, alias="indexUid")
    status: TaskStatus
    type: str | None = None
    error: TaskError | None = None

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        if self.error.code:
            return f"{self.error.message} ({self.error.code})"
        return self.error.message


class IndexStats(_WireModel):
    number_of_documents: int = Field(default=0, alias="numberOfDocuments")
    is_indexing: bool = Field(default=False, alias="isIndexing")


class SearchResult(_WireModel):
    hits: list[dict[str, Any]] = Field(default_factory=list)
    estimated_total_hits: int | None = Field(default=None, alias="estimatedTotalHits")
    processing_time_ms: int | None = Field(default=None, alias="processingTimeMs")

    @property
    def total_hits(self) -> int:
        if self.estimated_total_hits is not None:
            return self.estimated_total_hits
        return len(self.hits)


@dataclass(frozen=True)
class SearchQuery:
    q: str
    limit: int = 20
    offset: int = 0
    filter: str | None = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"q": self.q, "limit": self.limit, "offset": self.offset}
        if self.filter:
            body["filter"] = self.filter
        return body
