"""Logging helpers.

Every module logs through a child of the ``publishing_store`` logger; the
parent gets a single stream handler and its level from
``config.log_level_name()``.
"""
from __future__ import annotations

import logging
import threading

from publishing_store import config

ROOT_LOGGER = "publishing_store"

_LOCK = threading.Lock()
_CONFIGURED = False


def _configure_root() -> None:
    global _CONFIGURED
    with _LOCK:
        if _CONFIGURED:
            return
        root = logging.getLogger(ROOT_LOGGER)
        root.setLevel(getattr(logging, config.log_level_name(), logging.INFO))
        if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[pubstore] %(asctime)s %(levelname)s %(name)s %(message)s"))
            root.addHandler(handler)
        root.propagate = False
        _CONFIGURED = True


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    _configure_root()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger", "ROOT_LOGGER"]
