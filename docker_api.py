# File: docker_api.py
"""
docker_api.py

Thin client for the Docker Engine control socket: lists unhealthy containers
and issues restart commands. Uses the docker SDK's APIClient purely as a
requests session bound to the unix socket, so responses come back raw and
the restart status code is left to the caller's policy.
"""
import json
from dataclasses import dataclass, field

import docker
import requests
from docker.constants import DEFAULT_DOCKER_API_VERSION

from errors import DecodeError, TransportError

NULL_NAME = 'null'
STOP_TIMEOUT_LABEL = 'autoheal.stop.timeout'


@dataclass(frozen=True)
class ContainerRecord:
    id: str
    names: tuple = ()
    state: str = ''
    labels: dict = field(default_factory=dict)

    @classmethod
    def from_json(cls, obj):
        if not isinstance(obj, dict):
            raise DecodeError(f"expected container object, got {type(obj).__name__}")
        return cls(
            id=obj.get('Id') or '',
            names=tuple(obj.get('Names') or ()),
            state=obj.get('State') or '',
            labels=dict(obj.get('Labels') or {}),
        )

    @property
    def name(self):
        return self.names[0] if self.names else ''

    @property
    def short_id(self):
        return self.id[:12]

    @property
    def stop_timeout(self):
        return self.labels.get(STOP_TIMEOUT_LABEL, '')

    def has_name(self):
        return bool(self.names) and self.names[0] != NULL_NAME


def parse_containers(body: str) -> list[ContainerRecord]:
    """Parse a /containers/json response body into records, preserving order."""
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"invalid JSON from runtime: {e}") from e
    if not isinstance(raw, list):
        raise DecodeError(f"expected JSON array, got {type(raw).__name__}")
    return [ContainerRecord.from_json(obj) for obj in raw]


class DockerClient:
    def __init__(self, cfg, api=None):
        self.cfg = cfg
        self.timeout = cfg.request_timeout
        # explicit version: no round trip to the daemon at construction
        self.api = api or docker.APIClient(
            base_url=f"unix://{cfg.docker_sock}",
            version=DEFAULT_DOCKER_API_VERSION,
            timeout=cfg.request_timeout,
        )

    def _url(self, path):
        return f"{self.api.base_url}{path}"

    def list_unhealthy(self) -> list[ContainerRecord]:
        query = json.dumps(self.cfg.filters())
        try:
            resp = self.api.get(self._url('/containers/json'), params={'filters': query}, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        return parse_containers(resp.text)

    def restart(self, container_id, timeout_override=''):
        t = timeout_override or self.cfg.default_stop_timeout
        try:
            resp = self.api.post(self._url(f"/containers/{container_id}/restart"), params={'t': t}, data={}, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        # status is reported back but is not part of the success decision
        return resp.status_code
