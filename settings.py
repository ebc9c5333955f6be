# File: settings.py
"""
settings.py

Resolves runtime parameters from the environment into an immutable Config.
Missing or empty variables fall back to defaults; unparsable numbers are
silently replaced by their default so the watcher never fails to start on a typo.
"""
import os
from dataclasses import dataclass
from typing import Optional

ALL_CONTAINERS = 'all'


@dataclass(frozen=True)
class Config:
    docker_sock: str = '/var/run/docker.sock'
    container_label: str = ALL_CONTAINERS
    interval: float = 5
    start_period: float = 0
    default_stop_timeout: str = '10'
    request_timeout: Optional[float] = 30
    webhook_url: str = ''
    webhook_key: str = 'text'
    metrics_port: int = 2333
    metrics_enabled: bool = True

    def filters(self) -> dict[str, list[str]]:
        """Filter object for the container listing query."""
        qs = {'health': ['unhealthy']}
        if self.container_label != ALL_CONTAINERS:
            qs['label'] = [f"{self.container_label}=true"]
        return qs


def get_env(environ, name, default):
    val = environ.get(name, '')
    if val == '':
        return default
    return val


def get_env_int(environ, name, default):
    try:
        return int(get_env(environ, name, str(default)))
    except ValueError:
        return default


def get_env_duration(environ, name, default):
    # negative sleeps return at once
    return max(get_env_int(environ, name, default), 0)


def get_env_timeout(environ, name, default):
    """Request timeout in seconds; zero or negative means no timeout (None)."""
    t = get_env_int(environ, name, default)
    return t if t > 0 else None


def load_config(environ=None) -> Config:
    env = os.environ if environ is None else environ
    return Config(
        docker_sock=get_env(env, 'DOCKER_SOCK', '/var/run/docker.sock'),
        container_label=get_env(env, 'AUTOHEAL_CONTAINER_LABEL', ALL_CONTAINERS),
        interval=get_env_duration(env, 'AUTOHEAL_INTERVAL', 5),
        start_period=get_env_duration(env, 'AUTOHEAL_START_PERIOD', 0),
        default_stop_timeout=get_env(env, 'AUTOHEAL_DEFAULT_STOP_TIMEOUT', '10'),
        request_timeout=get_env_timeout(env, 'CURL_TIMEOUT', 30),
        webhook_url=get_env(env, 'WEBHOOK_URL', ''),
        webhook_key=get_env(env, 'WEBHOOK_KEY', 'text'),
        metrics_port=get_env_int(env, 'METRICS_PORT', 2333),
        metrics_enabled=get_env(env, 'METRICS_ENABLED', 'true') == 'true',
    )
