# File: main.py
"""
main.py

Wires config, Docker client, notifier and metrics together, waits out the
start period, then runs a health-check cycle every AUTOHEAL_INTERVAL seconds
until the process is killed. Cycles never overlap.
"""
import sys
import time

from docker_api import DockerClient
from metrics import MetricsRecorder
from notifier import Notifier
from restarter import RestartManager
from settings import load_config


def build(cfg):
    recorder = MetricsRecorder(cfg)
    restarter = RestartManager(DockerClient(cfg), Notifier(cfg), recorder)
    return restarter, recorder


def main():
    cfg = load_config()
    restarter, recorder = build(cfg)

    try:
        recorder.serve()
    except OSError as e:
        print(f"Failed to start metrics server. {e}", flush=True)
        sys.exit(1)

    print(f"Monitoring containers for unhealthy status in {cfg.start_period}s", flush=True)
    try:
        time.sleep(cfg.start_period)
        while True:
            restarter.run_cycle()
            time.sleep(cfg.interval)
    except KeyboardInterrupt:
        print('Exiting...')


if __name__ == '__main__':
    main()
