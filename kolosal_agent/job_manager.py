"""Background queue that runs agent functions as jobs."""

from __future__ import annotations

import enum
import logging
import threading
from collections import deque
from dataclasses import dataclass, field

from .agent_data import AgentData, generate_uuid
from .function_manager import FunctionManager, FunctionResult


class JobStatus(enum.Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass
class Job:
    function_name: str
    parameters: AgentData = field(default_factory=AgentData)
    id: str = field(default_factory=generate_uuid)
    status: JobStatus = JobStatus.PENDING
    priority: int = 0
    requester: str = ""
    result: FunctionResult = field(default_factory=FunctionResult)


class JobManager:
    """Runs submitted jobs in submission order on a single worker thread."""

    def __init__(
        self, function_manager: FunctionManager, logger: logging.Logger | None = None
    ) -> None:
        self._function_manager = function_manager
        self._logger = logger or logging.getLogger(__name__)
        self._queue: deque[Job] = deque()
        self._jobs: dict[str, Job] = {}
        self._cond = threading.Condition()
        self._running = False
        self._worker: threading.Thread | None = None

    def __enter__(self) -> JobManager:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        with self._cond:
            if self._running:
                return
            self._running = True
        self._worker = threading.Thread(target=self._worker_loop, daemon=True)
        self._worker.start()
        self._logger.info("Job manager started")

    def stop(self) -> None:
        with self._cond:
            if not self._running:
                return
            self._running = False
            self._cond.notify_all()
        if self._worker is not None:
            self._worker.join()
            self._worker = None
        self._logger.info("Job manager stopped")

    def submit_job(
        self,
        function_name: str,
        parameters: AgentData | None = None,
        priority: int = 0,
        requester: str = "",
    ) -> str:
        job = Job(
            function_name,
            parameters if parameters is not None else AgentData(),
            priority=priority,
            requester=requester,
        )
        with self._cond:
            self._queue.append(job)
            self._jobs[job.id] = job
            self._cond.notify()
        self._logger.debug("Job submitted: %s (function: %s)", job.id, function_name)
        return job.id

    def get_job_status(self, job_id: str) -> JobStatus:
        with self._cond:
            job = self._jobs.get(job_id)
            return job.status if job is not None else JobStatus.FAILED

    def get_job_result(self, job_id: str) -> FunctionResult:
        with self._cond:
            job = self._jobs.get(job_id)
            return job.result if job is not None else FunctionResult(False, "Job not found")

    def cancel_job(self, job_id: str) -> bool:
        with self._cond:
            job = self._jobs.get(job_id)
            if job is None or job.status is not JobStatus.PENDING:
                return False
            job.status = JobStatus.CANCELLED
        self._logger.info("Job cancelled: %s", job_id)
        return True

    def get_stats(self) -> dict[str, int]:
        with self._cond:
            return {"total": len(self._jobs), "queue_size": len(self._queue)}

    def _next_job(self) -> Job | None:
        with self._cond:
            while True:
                while not self._queue and self._running:
                    self._cond.wait()
                if not self._running:
                    return None
                job = self._queue.popleft()
                if job.status is JobStatus.CANCELLED:
                    continue
                job.status = JobStatus.RUNNING
                return job

    def _worker_loop(self) -> None:
        while (job := self._next_job()) is not None:
            self._logger.debug("Processing job: %s", job.id)
            try:
                result = self._function_manager.execute_function(
                    job.function_name, job.parameters
                )
            except Exception as exc:
                result = FunctionResult(False, str(exc))
            with self._cond:
                job.result = result
                job.status = JobStatus.COMPLETED if result.success else JobStatus.FAILED
            self._logger.debug(
                "Job completed: %s (status: %s)", job.id, "SUCCESS" if result.success else "FAILED"
            )