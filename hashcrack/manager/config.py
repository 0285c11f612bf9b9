"""Manager settings read from the environment."""

import os
from dataclasses import dataclass


class ConfigError(ValueError):
    """An environment variable holds an unusable value."""


def _int(environ, name, default):
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class ManagerConfig:
    log_level: str = "info"
    main_server_port: int = 8080
    probe_server_port: int = 8081
    alphabet: str = "abcdefghijklmnopqrstuvwxyz0123456789"
    ttl: int = 10
    worker_count: int = 3
    worker_urls: str = "worker1:8080,worker2:8080,worker3:8080"

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("LOG_LEVEL", cls.log_level),
            main_server_port=_int(env, "MAIN_SERVER_PORT", cls.main_server_port),
            probe_server_port=_int(env, "PROBE_SERVER_PORT", cls.probe_server_port),
            alphabet=env.get("ALPHABET", cls.alphabet),
            ttl=_int(env, "TTL", cls.ttl),
            worker_count=_int(env, "WORKER_COUNT", cls.worker_count),
            worker_urls=env.get("WORKER_URLS", cls.worker_urls),
        )


def load_config(environ=None):
    """Read the manager configuration from environ, or the process environment."""
    return ManagerConfig.from_env(environ)