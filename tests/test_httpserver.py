import threading
import urllib.request

from hashcrack.httpserver import Server


def _app(environ, start_response):
    start_response("200 OK", [("Content-Type", "text/plain")])
    return [environ["PATH_INFO"].encode()]


def test_serves_and_shuts_down():
    server = Server(0, _app)
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    assert server.started.wait(5)
    host, port = server.address
    with urllib.request.urlopen(f"http://127.0.0.1:{port}/ping", timeout=5) as resp:
        assert resp.read() == b"/ping"
    server.shutdown()
    thread.join(5)
    assert not thread.is_alive()


def test_run_after_shutdown_returns_immediately():
    server = Server(0, _app)
    server.shutdown()
    server.run()
    assert server.address is None
    assert not server.started.is_set()