# File: errors.py
"""
errors.py

Error taxonomy shared by the Docker client and the webhook notifier.
"""


class AutohealError(Exception):
    pass


class TransportError(AutohealError):
    """Socket/network failure or timeout talking to the runtime or a webhook."""


class DecodeError(AutohealError):
    """Runtime returned a body that is not the expected JSON."""
