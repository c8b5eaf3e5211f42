"""
Task poller - wait for an asynchronous indexing task to reach a terminal status.

States: polling -> succeeded | failed | query_error | timed_out. A status
query error is never retried; ``timeout=None`` polls until a terminal status.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from catalog.search.index import SearchIndex, SearchServiceError
from catalog.search.models import Task, TaskStatus

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.5


class PollState(str, Enum):
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    QUERY_ERROR = "query_error"
    TIMED_OUT = "timed_out"


@dataclass
class PollResult:
    task_uid: int
    state: PollState
    attempts: int
    task: Task | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.state is PollState.SUCCEEDED


class TaskPoller:
    def __init__(
        self,
        index: SearchIndex,
        interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.index = index
        self.interval = interval
        self.timeout = timeout
        self._sleep = sleep
        self._clock = clock

    async def poll(self, task_uid: int) -> PollResult:
        deadline = None if self.timeout is None else self._clock() + self.timeout
        attempts = 0
        logger.info("Waiting for task %d to complete", task_uid)

        while True:
            attempts += 1
            try:
                task = await self.index.get_task(task_uid)
            except SearchServiceError as e:
                logger.warning("Could not get status of task %d: %s", task_uid, e)
                return PollResult(task_uid, PollState.QUERY_ERROR, attempts, error=str(e))

            if task.status is TaskStatus.SUCCEEDED:
                logger.info("Task %d succeeded after %d status checks", task_uid, attempts)
                return PollResult(task_uid, PollState.SUCCEEDED, attempts, task=task)
            if task.status.is_terminal:
                error = task.error_message or f"task {task.status.value}"
                logger.error("Task %d failed: %s", task_uid, error)
                return PollResult(task_uid, PollState.FAILED, attempts, task=task, error=error)

            if deadline is not None and self._clock() >= deadline:
                logger.error("Task %d still %s after %.1fs", task_uid, task.status.value, self.timeout)
                return PollResult(
                    task_uid,
                    PollState.TIMED_OUT,
                    attempts,
                    task=task,
                    error=f"still {task.status.value} after {self.timeout}s",
                )
            await self._sleep(self.interval)
