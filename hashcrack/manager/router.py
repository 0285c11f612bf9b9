"""Public and internal HTTP endpoints of the manager."""

from urllib.parse import parse_qs

from hashcrack.manager.domain import Status
from hashcrack.messages import (
    CrackHashRequest,
    CrackHashResponse,
    CrackHashStatus,
    MessageError,
    WorkerResponse,
)

CRACK_PATH = "/api/hash/crack"
STATUS_PATH = "/api/hash/status"
UPDATE_PATH = "/internal/api/manager/hash/crack/request"


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


def _json(start_response, data):
    start_response(
        "200 OK",
        [("Content-Type", "application/json"), ("Content-Length", str(len(data)))],
    )
    return [data]


def _read_body(environ):
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    return environ["wsgi.input"].read(length) if length > 0 else b""


class ManagerRouter:
    """WSGI routing for crack requests, status queries and worker answers."""

    def __init__(self, hash_use_case, logger):
        self.hash_use_case = hash_use_case
        self.logger = logger
        self._routes = {
            CRACK_PATH: (("POST",), self._crack_hash),
            STATUS_PATH: (("GET", "HEAD"), self._get_status),
            UPDATE_PATH: (("PATCH",), self._update_request),
        }

    def handler(self):
        return self._app

    def _app(self, environ, start_response):
        route = self._routes.get(environ.get("PATH_INFO"))
        if route is None:
            return _text(start_response, "404 Not Found", "404 page not found\n")
        methods, action = route
        if environ.get("REQUEST_METHOD") not in methods:
            return _text(
                start_response,
                "405 Method Not Allowed",
                "Method Not Allowed\n",
                [("Allow", ", ".join(methods))],
            )
        return action(environ, start_response)

    def _crack_hash(self, environ, start_response):
        try:
            request = CrackHashRequest.from_json(_read_body(environ))
        except MessageError as exc:
            self.logger.error("failed to decode request body", extra={"error": str(exc)})
            return _text(start_response, "400 Bad Request", "invalid request body\n")
        try:
            hash_data = self.hash_use_case.crack_hash(request.hash, request.max_length)
        except Exception as exc:
            self.logger.error("failed to process hash request", extra={"error": str(exc)})
            return _text(start_response, "500 Internal Server Error", "failed to process request\n")
        return _json(start_response, CrackHashResponse(hash_data.request_id).to_json())

    def _get_status(self, environ, start_response):
        query = parse_qs(environ.get("QUERY_STRING", ""))
        request_id = query.get("requestId", [""])[0]
        if not request_id:
            self.logger.error("missing requestId parameter")
            return _text(start_response, "400 Bad Request", "missing requestId parameter\n")
        try:
            hash_data = self.hash_use_case.get_status(request_id)
        except Exception as exc:
            self.logger.error("failed to get status", extra={"error": str(exc)})
            return _text(start_response, "500 Internal Server Error", "failed to get status\n")
        status = Status(hash_data.status)
        data = None if status is Status.ERROR else (list(hash_data.data) or None)
        return _json(start_response, CrackHashStatus(status.value, data).to_json())

    def _update_request(self, environ, start_response):
        try:
            response = WorkerResponse.from_xml(_read_body(environ))
        except MessageError as exc:
            self.logger.error("failed to decode worker response", extra={"error": str(exc)})
            return _text(start_response, "400 Bad Request", "invalid request body\n")
        try:
            self.hash_use_case.update_request(response.request_id, response.words)
        except Exception as exc:
            self.logger.error("failed to update request status", extra={"error": str(exc)})
            return _text(
                start_response, "500 Internal Server Error", "failed to update request status\n"
            )
        start_response("200 OK", [("Content-Length", "0")])
        return [b""]