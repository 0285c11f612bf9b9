import io
import logging
from wsgiref.util import setup_testing_defaults

from hashcrack.probe import ProbeRouter


def _call(app, method, path):
    environ = {}
    setup_testing_defaults(environ)
    environ.update(REQUEST_METHOD=method, PATH_INFO=path)
    environ["wsgi.input"] = io.BytesIO(b"")
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status

    body = b"".join(app(environ, start_response))
    return captured["status"], body


def test_health_ok():
    app = ProbeRouter(logging.getLogger("t")).handler()
    assert _call(app, "GET", "/healthz") == ("200 OK", b"success")


def test_health_any_method():
    app = ProbeRouter(logging.getLogger("t")).handler()
    status, _ = _call(app, "POST", "/healthz")
    assert status == "200 OK"


def test_unknown_path():
    app = ProbeRouter(logging.getLogger("t")).handler()
    status, _ = _call(app, "GET", "/other")
    assert status.startswith("404")