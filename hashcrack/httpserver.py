"""A small threaded WSGI server with graceful shutdown."""

import threading
from socketserver import ThreadingMixIn
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

SHUTDOWN_TIMEOUT = 5.0


class _QuietHandler(WSGIRequestHandler):
    def log_message(self, format, *args):
        pass


class _ThreadingServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True
    allow_reuse_address = True


class Server:
    """Serve a WSGI application on a port until shut down."""

    def __init__(self, port, app):
        self.port = port
        self.app = app
        self.host = ""
        self.shutdown_timeout = SHUTDOWN_TIMEOUT
        self.started = threading.Event()
        self._server = None
        self._closed = False
        self._lock = threading.Lock()

    @property
    def address(self):
        """The bound (host, port), or None before the server starts."""
        return self._server.server_address if self._server is not None else None

    def run(self):
        """Bind and serve until shutdown; returns at once if already shut down."""
        with self._lock:
            if self._closed:
                return
            self._server = make_server(
                self.host,
                self.port,
                self.app,
                server_class=_ThreadingServer,
                handler_class=_QuietHandler,
            )
        self.started.set()
        try:
            self._server.serve_forever(poll_interval=0.1)
        finally:
            self._server.server_close()

    def shutdown(self):
        """Stop serving; raises TimeoutError if the server does not stop in time."""
        with self._lock:
            self._closed = True
            server = self._server
        if server is None:
            return
        stopper = threading.Thread(target=server.shutdown, daemon=True)
        stopper.start()
        stopper.join(self.shutdown_timeout)
        if stopper.is_alive():
            raise TimeoutError("http server did not stop in time")