"""Logging helpers that keep every jsdev logger under one namespace."""

import logging
import sys

BASE_LOGGER = "jsdev"


def setup_base_logger(level=logging.INFO, stream=None):
    """
    Configure the base 'jsdev' logger and return it.

    Calling it again replaces the handler, so the stream is always the one
    current at call time (sys.stderr by default).
    """
    base = logging.getLogger(BASE_LOGGER)
    base.handlers.clear()
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name=None):
    """Return a logger namespaced under 'jsdev'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
