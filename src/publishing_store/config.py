"""Runtime configuration accessors.

Centralizes environment variable parsing and defaults for the store and
the ``pubstore`` command line.
"""
from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ID_PREFIX = "new-"
_TRUE = {"1", "true", "yes", "on"}


def _raw_env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def env_bool(name: str, default: bool = False) -> bool:
    raw = _raw_env(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


def log_level_name() -> str:
    return _raw_env("PUBSTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()  # type: ignore[union-attr]


def id_prefix() -> str:
    """Prefix for generated record ids (PUBSTORE_ID_PREFIX)."""
    return _raw_env("PUBSTORE_ID_PREFIX", DEFAULT_ID_PREFIX)  # type: ignore[return-value]


def seed_on_start() -> bool:
    """Whether new clients load the fixture data (PUBSTORE_SEED)."""
    return env_bool("PUBSTORE_SEED", True)


def summarize_runtime_config() -> dict:
    return {
        "log_level": log_level_name(),
        "id_prefix": id_prefix(),
        "seed": seed_on_start(),
    }


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_ID_PREFIX",
    "env_bool",
    "log_level_name",
    "id_prefix",
    "seed_on_start",
    "summarize_runtime_config",
]
