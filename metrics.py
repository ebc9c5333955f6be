# File: metrics.py
"""
metrics.py

Prometheus counter of restart attempts, labeled by container name and result,
served on METRICS_PORT from a background daemon thread. Everything here is a
no-op when METRICS_ENABLED is not "true".
"""
from datetime import datetime

from prometheus_client import CollectorRegistry, Counter, start_http_server

TIME_FORMAT = '%Y.%m.%d %H:%M:%S'
RESTART_SUCCESS = 'Successfully restarted the container'
RESTART_FAILURE = 'Failed to restart the container'


class MetricsRecorder:
    def __init__(self, cfg, registry=None):
        self.enabled = cfg.metrics_enabled
        self.port = cfg.metrics_port
        self.registry = registry or CollectorRegistry()
        self.counter = None
        if self.enabled:
            self.counter = Counter(
                'containers_restarts',
                'Total number of containers restart.',
                ['container', 'result'],
                registry=self.registry,
            )

    def record(self, container_name, result):
        if not self.enabled:
            return
        self.counter.labels(container=container_name, result=result).inc()

    def serve(self):
        """Start the /metrics HTTP server thread. Raises OSError if the port cannot be bound."""
        if not self.enabled:
            return None
        print(f"{datetime.now().strftime(TIME_FORMAT)} Serving metrics at : {self.port} /metrics", flush=True)
        return start_http_server(self.port, registry=self.registry)
