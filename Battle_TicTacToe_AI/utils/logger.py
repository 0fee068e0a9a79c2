"""Timestamped console logging for matches and arena runs."""

import datetime


def log_event(message, tag=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    prefix = f"[{timestamp}]" if tag is None else f"[{timestamp}] [{tag}]"
    print(f"{prefix} {message}")


def tagged(tag):
    """Logger callable that prefixes every message with `tag`."""
    return lambda message: log_event(message, tag=tag)


def silent(message):
    """Logger that drops messages (bulk arena games)."""
