# File: notifier.py
"""
notifier.py

Writes event messages to stdout and, when WEBHOOK_URL is set, forwards them
as a JSON POST ({WEBHOOK_KEY: message}) to the configured endpoint.
"""
import requests

from errors import TransportError

CONTENT_TYPE = 'application/json'


class Notifier:
    def __init__(self, cfg, session=None):
        self.url = cfg.webhook_url
        self.key = cfg.webhook_key
        self.timeout = cfg.request_timeout
        self.session = session or requests.Session()

    def notify(self, message):
        print(message, flush=True)
        if not self.url:
            return
        try:
            self.session.post(self.url, json={self.key: message}, headers={'Content-Type': CONTENT_TYPE}, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
