"""
Runtime settings, read from the environment.

    VOLSPEC_ENV        dev | qa | prod            (default: dev)
    VOLSPEC_STRICT     1/true/yes enables strict option validation
    VOLSPEC_LOG_LEVEL  logging level name for the CLI (default: WARNING)
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    strict: bool = False
    log_level: str = "WARNING"


def load_settings() -> Settings:
    env = (os.getenv("VOLSPEC_ENV") or "dev").strip().lower()
    strict = (os.getenv("VOLSPEC_STRICT") or "0").strip().lower() in _TRUTHY
    log_level = (os.getenv("VOLSPEC_LOG_LEVEL") or "WARNING").strip().upper()
    return Settings(env=env, strict=strict, log_level=log_level)
