import pytest

from catalog.ingestion.poller import PollState, TaskPoller
from catalog.search.models import TaskStatus
from tests.fakes import FakeSearchIndex


class FakeClock:
    def __init__(self):
        self.now = 0.0


@pytest.mark.asyncio
async def test_processing_twice_then_succeeded(recording_sleep):
    index = FakeSearchIndex()
    index.task_statuses[42] = [TaskStatus.PROCESSING, TaskStatus.PROCESSING, TaskStatus.SUCCEEDED]
    poller = TaskPoller(index, interval=0.5, sleep=recording_sleep)

    result = await poller.poll(42)

    assert result.ok
    assert result.state is PollState.SUCCEEDED
    assert result.attempts == 3
    assert index.task_queries == [42, 42, 42]
    assert recording_sleep.calls == [0.5, 0.5]


@pytest.mark.asyncio
async def test_enqueued_counts_as_polling(recording_sleep):
    index = FakeSearchIndex()
    index.task_statuses[1] = [TaskStatus.ENQUEUED, TaskStatus.PROCESSING, TaskStatus.SUCCEEDED]
    result = await TaskPoller(index, sleep=recording_sleep).poll(1)
    assert result.ok
    assert len(index.task_queries) == 3


@pytest.mark.asyncio
async def test_immediate_success_does_not_sleep(recording_sleep):
    index = FakeSearchIndex()
    result = await TaskPoller(index, sleep=recording_sleep).poll(5)
    assert result.ok
    assert index.task_queries == [5]
    assert recording_sleep.calls == []


@pytest.mark.asyncio
async def test_failed_task_returns_error_detail(recording_sleep):
    index = FakeSearchIndex()
    index.task_statuses[9] = [TaskStatus.PROCESSING, TaskStatus.FAILED]
    index.task_errors[9] = {"message": "Document id `abc` is invalid", "code": "invalid_document_id"}

    result = await TaskPoller(index, sleep=recording_sleep).poll(9)

    assert not result.ok
    assert result.state is PollState.FAILED
    assert result.error == "Document id `abc` is invalid (invalid_document_id)"
    # no status query after the terminal result
    assert index.task_queries == [9, 9]


@pytest.mark.asyncio
async def test_canceled_task_is_a_failure(recording_sleep):
    index = FakeSearchIndex()
    index.task_statuses[3] = [TaskStatus.CANCELED]
    result = await TaskPoller(index, sleep=recording_sleep).poll(3)
    assert result.state is PollState.FAILED
    assert result.error == "task canceled"


@pytest.mark.asyncio
async def test_query_error_is_not_retried(recording_sleep):
    index = FakeSearchIndex()
    index.fail_get_task = True
    result = await TaskPoller(index, sleep=recording_sleep).poll(4)
    assert result.state is PollState.QUERY_ERROR
    assert "connection refused" in result.error
    assert index.task_queries == [4]
    assert recording_sleep.calls == []


@pytest.mark.asyncio
async def test_deadline_stops_polling():
    index = FakeSearchIndex()
    index.task_statuses[8] = [TaskStatus.PROCESSING]
    clock = FakeClock()

    async def advancing_sleep(seconds):
        clock.now += seconds

    poller = TaskPoller(index, interval=0.5, timeout=2.0, sleep=advancing_sleep, clock=lambda: clock.now)
    result = await poller.poll(8)

    assert result.state is PollState.TIMED_OUT
    assert result.task.status is TaskStatus.PROCESSING
    # checks at t=0, 0.5, 1.0, 1.5, 2.0
    assert result.attempts == 5
