"""Reporting search results to the manager."""

from hashcrack.messages import WorkerResponse
from hashcrack.transport import DeliveryError, send_xml

MANAGER_SOLVE_TASK_ENDPOINT = "/internal/api/manager/hash/crack/request"


class Repository:
    """Client for the manager's result endpoint."""

    def __init__(self, manager_url, logger):
        self.manager_url = manager_url
        self.logger = logger
        self.timeout = None

    def send_cracked_task_to_manager(self, request_id, words):
        """PATCH the found words to the manager; raises DeliveryError on failure."""
        body = WorkerResponse(request_id, list(words)).to_xml()
        try:
            send_xml(self.manager_url + MANAGER_SOLVE_TASK_ENDPOINT, "PATCH", body, self.timeout)
        except DeliveryError as exc:
            self.logger.error("failed to send result to manager", extra={"error": str(exc)})
            raise
        self.logger.info(
            "solve task successfully sent to manager", extra={"managerURL": self.manager_url}
        )