"""Delivering task parts to workers."""

from hashcrack.messages import WorkerRequest
from hashcrack.transport import DeliveryError, send_xml

WORKER_TASK_ENDPOINT = "/internal/api/worker/hash/crack/task"


class Repository:
    """Client for the workers' task endpoint."""

    def __init__(self, logger):
        self.logger = logger
        self.timeout = None

    def send_task_to_worker(self, worker_url, task):
        """POST the task to the worker; raises DeliveryError on failure."""
        body = WorkerRequest(
            request_id=task.request_id,
            hash=task.hash,
            alphabet=task.alphabet,
            max_length=task.max_length,
            part_number=task.part_number,
            part_count=task.part_count,
        ).to_xml()
        try:
            send_xml(worker_url + WORKER_TASK_ENDPOINT, "POST", body, self.timeout)
        except DeliveryError as exc:
            self.logger.error("failed to send task to worker", extra={"error": str(exc)})
            raise
        self.logger.info("task successfully sent to worker", extra={"workerURL": worker_url})