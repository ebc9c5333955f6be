# File: restarter.py
"""
restarter.py

Contains RestartManager, which runs one health-check cycle: lists unhealthy
containers, skips the nameless and the already-restarting ones, restarts the
rest and routes each restart result to the metrics counter and the notifier.
Containers are handled strictly in the order the runtime returned them.
"""
import enum
from datetime import datetime

from errors import AutohealError, DecodeError, TransportError
from metrics import RESTART_FAILURE, RESTART_SUCCESS, TIME_FORMAT

RESTARTING = 'restarting'


class Outcome(enum.Enum):
    SKIPPED_NO_NAME = 'skipped_no_name'
    SKIPPED_RESTARTING = 'skipped_restarting'
    RESTARTED = 'restarted'
    RESTART_FAILED = 'restart_failed'


class RestartManager:
    def __init__(self, client, notifier, recorder, clock=datetime.now):
        self.client = client
        self.notifier = notifier
        self.recorder = recorder
        self.clock = clock

    def run_cycle(self):
        """Handle every unhealthy container once. Returns None if the listing failed."""
        try:
            containers = self.client.list_unhealthy()
        except (TransportError, DecodeError) as e:
            print(f"Failed to list containers. {e}", flush=True)
            return None
        return [self.handle(c) for c in containers]

    def handle(self, container):
        t = self.clock().strftime(TIME_FORMAT)
        cid = container.short_id
        if not container.has_name():
            print(f"{t} Container name of ({cid}) is null, which implies container does not exist - don't restart.", flush=True)
            return Outcome.SKIPPED_NO_NAME
        name = container.name
        if container.state == RESTARTING:
            print(f"{t} Container {name} ({cid}) found to be restarting - don't restart.", flush=True)
            return Outcome.SKIPPED_RESTARTING

        print(f"{t} Container {name} ({cid}) found to be unhealthy - Restarting container now.", flush=True)
        try:
            status = self.client.restart(container.id, container.stop_timeout)
        except TransportError as e:
            print(f"{t} Container {name} ({cid}) restart failed: {e}", flush=True)
            outcome, result = Outcome.RESTART_FAILED, RESTART_FAILURE
        else:
            if status >= 300:
                print(f"{t} Container {name} ({cid}) restart returned HTTP {status}", flush=True)
            outcome, result = Outcome.RESTARTED, RESTART_SUCCESS

        self.recorder.record(name, result)
        try:
            self.notifier.notify(f"{t} Container {name} ({cid}) found to be unhealthy. {result}.")
        except AutohealError as e:
            print(f"Failed to call webhook. {e}", flush=True)
        return outcome
