import time

import pytest

from kolosal_agent.agent_data import AgentData
from kolosal_agent.builtin_basic import AddFunction
from kolosal_agent.function_manager import FunctionManager
from kolosal_agent.job_manager import JobManager, JobStatus


@pytest.fixture
def functions():
    fm = FunctionManager()
    fm.register_function(AddFunction())
    return fm


def _wait_done(manager, job_id, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        status = manager.get_job_status(job_id)
        if status not in (JobStatus.PENDING, JobStatus.RUNNING):
            return status
        time.sleep(0.01)
    return manager.get_job_status(job_id)


def test_job_runs_to_completion(functions):
    with JobManager(functions) as manager:
        job_id = manager.submit_job("add", AgentData({"a": 2, "b": 3}))
        assert _wait_done(manager, job_id) is JobStatus.COMPLETED
        result = manager.get_job_result(job_id)
    assert result.success
    assert result.result_data.get_int("result") == 5


def test_unknown_function_fails(functions):
    with JobManager(functions) as manager:
        job_id = manager.submit_job("nope", AgentData())
        assert _wait_done(manager, job_id) is JobStatus.FAILED
        assert manager.get_job_result(job_id).error_message == "Function not found: nope"


def test_unknown_job_id(functions):
    manager = JobManager(functions)
    assert manager.get_job_status("missing") is JobStatus.FAILED
    result = manager.get_job_result("missing")
    assert not result.success
    assert result.error_message == "Job not found"


def test_cancel_pending_job_is_never_run(functions):
    manager = JobManager(functions)
    cancelled = manager.submit_job("add", AgentData({"a": 1, "b": 1}))
    assert manager.get_job_status(cancelled) is JobStatus.PENDING
    assert manager.cancel_job(cancelled) is True
    assert manager.cancel_job(cancelled) is False
    with manager:
        other = manager.submit_job("add", AgentData({"a": 1, "b": 2}))
        assert _wait_done(manager, other) is JobStatus.COMPLETED
    assert manager.get_job_status(cancelled) is JobStatus.CANCELLED
    assert manager.get_job_result(cancelled).result_data.has_key("result") is False


def test_cancel_finished_job_fails(functions):
    with JobManager(functions) as manager:
        job_id = manager.submit_job("add", AgentData({"a": 1, "b": 2}))
        _wait_done(manager, job_id)
        assert manager.cancel_job(job_id) is False
        assert manager.cancel_job("missing") is False


def test_stats_track_queue(functions):
    manager = JobManager(functions)
    first = manager.submit_job("add", AgentData({"a": 1, "b": 2}), priority=5, requester="me")
    second = manager.submit_job("add", AgentData({"a": 3, "b": 4}))
    assert manager.get_stats() == {"total": 2, "queue_size": 2}
    with manager:
        _wait_done(manager, first)
        _wait_done(manager, second)
        assert manager.get_stats() == {"total": 2, "queue_size": 0}


def test_job_ids_are_unique(functions):
    manager = JobManager(functions)
    ids = {manager.submit_job("add") for _ in range(20)}
    assert len(ids) == 20


def test_start_and_stop_are_idempotent(functions):
    manager = JobManager(functions)
    manager.stop()
    manager.start()
    manager.start()
    job_id = manager.submit_job("add", AgentData({"a": 4, "b": 4}))
    assert _wait_done(manager, job_id) is JobStatus.COMPLETED
    manager.stop()
    manager.stop()
    assert manager.get_job_result(job_id).result_data.get_int("result") == 8