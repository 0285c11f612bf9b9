"""Health probe endpoint."""

HEALTH_PATH = "/healthz"


def _text(start_response, status, body):
    data = body.encode()
    start_response(
        status,
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(data))),
        ],
    )
    return [data]


class ProbeRouter:
    """Answer liveness checks with a fixed body."""

    def __init__(self, logger):
        self.logger = logger

    def health(self, environ, start_response):
        return _text(start_response, "200 OK", "success")

    def handler(self):
        def app(environ, start_response):
            if environ.get("PATH_INFO") == HEALTH_PATH:
                return self.health(environ, start_response)
            return _text(start_response, "404 Not Found", "404 page not found\n")

        return app