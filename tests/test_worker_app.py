import io
import logging
from wsgiref.util import setup_testing_defaults

import pytest

from hashcrack.worker.app import build_servers, run
from hashcrack.worker.config import ConfigError, WorkerConfig


def _call(app, method, path):
    environ = {}
    setup_testing_defaults(environ)
    environ.update(REQUEST_METHOD=method, PATH_INFO=path, CONTENT_LENGTH="0")
    environ["wsgi.input"] = io.BytesIO(b"")
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status

    body = b"".join(app(environ, start_response))
    return captured["status"], body


def test_build_servers_ports_and_routes():
    config = WorkerConfig("info", 9100, 9101, "m:1")
    main_server, probe_server = build_servers(config, logging.getLogger("t"))
    assert (main_server.port, probe_server.port) == (9100, 9101)
    assert _call(probe_server.app, "GET", "/healthz") == ("200 OK", b"success")
    assert _call(main_server.app, "GET", "/healthz")[0].startswith("404")
    assert _call(main_server.app, "POST", "/internal/api/worker/hash/crack/task")[0].startswith("400")


def test_run_rejects_bad_config():
    with pytest.raises(ConfigError):
        run({"MAIN_SERVER_PORT": "nope"})