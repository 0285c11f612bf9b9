"""HTTP entry point through which workers receive tasks."""

from hashcrack.messages import MessageError, WorkerRequest
from hashcrack.worker.domain import Task

TASK_PATH = "/internal/api/worker/hash/crack/task"


def _text(start_response, status, body, extra_headers=()):
    data = body.encode()
    start_response(
        status,
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(data))),
            *extra_headers,
        ],
    )
    return [data]


def _read_body(environ):
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    return environ["wsgi.input"].read(length) if length > 0 else b""


class WorkerRouter:
    """WSGI routing for the worker's task endpoint."""

    def __init__(self, task_cracker, logger):
        self.task_cracker = task_cracker
        self.logger = logger

    def handler(self):
        return self._app

    def _app(self, environ, start_response):
        if environ.get("PATH_INFO") != TASK_PATH:
            return _text(start_response, "404 Not Found", "404 page not found\n")
        if environ.get("REQUEST_METHOD") != "POST":
            return _text(
                start_response, "405 Method Not Allowed", "Method Not Allowed\n", [("Allow", "POST")]
            )
        try:
            request = WorkerRequest.from_xml(_read_body(environ))
        except MessageError as exc:
            self.logger.error("failed to decode worker request", extra={"error": str(exc)})
            return _text(start_response, "400 Bad Request", "invalid request body\n")
        task = Task(
            request_id=request.request_id,
            hash=request.hash,
            alphabet=request.alphabet,
            max_length=request.max_length,
            part_number=request.part_number,
            part_count=request.part_count,
        )
        try:
            self.task_cracker.crack_task(task)
        except Exception as exc:
            self.logger.error("failed to accept task", extra={"error": str(exc)})
            return _text(start_response, "500 Internal Server Error", "failed to accept task\n")
        start_response("200 OK", [("Content-Length", "0")])
        return [b""]