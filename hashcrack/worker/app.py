"""Worker process: task server plus health probe."""

import signal
import threading

from hashcrack.httpserver import Server
from hashcrack.logsetup import new_logger
from hashcrack.probe import ProbeRouter
from hashcrack.worker.config import load_config
from hashcrack.worker.domain import TaskCrackerUseCase
from hashcrack.worker.repository import Repository
from hashcrack.worker.router import WorkerRouter


def build_servers(config, logger):
    """Wire the worker's components and return (main_server, probe_server)."""
    repository = Repository(config.manager_url, logger)
    use_case = TaskCrackerUseCase(repository, logger)
    main_server = Server(config.main_server_port, WorkerRouter(use_case, logger).handler())
    probe_server = Server(config.probe_server_port, ProbeRouter(logger).handler())
    return main_server, probe_server


def _serve(name, server, logger):
    logger.info(f"starting {name} server")
    try:
        server.run()
    except OSError as exc:
        logger.error(f"{name} server error", extra={"error": str(exc)})


def run(environ=None):
    """Serve until SIGINT or SIGTERM, then stop both servers."""
    config = load_config(environ)
    logger = new_logger(config.log_level, "hashcrack.worker")
    servers = dict(zip(("main", "probe"), build_servers(config, logger)))

    stop = threading.Event()
    previous = {
        sig: signal.signal(sig, lambda *_: stop.set()) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    threads = [
        threading.Thread(target=_serve, args=(name, server, logger), daemon=True)
        for name, server in servers.items()
    ]
    for thread in threads:
        thread.start()
    try:
        while not stop.wait(0.5):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    logger.info("shutting down gracefully")
    for name, server in servers.items():
        try:
            server.shutdown()
        except TimeoutError as exc:
            logger.error(f"{name} server shutdown error", extra={"error": str(exc)})
    for thread in threads:
        thread.join()
    logger.info("servers stopped gracefully")


def main(argv=None):
    run()
    return 0