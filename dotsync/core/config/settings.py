"""
Settings — process configuration read from the environment.

There is no configuration file: the catalog is compiled in, and the
only tunables are logging and the platform-detection override.

    DOTSYNC_LOG_LEVEL       console log level (default WARNING)
    DOTSYNC_LOG_FILE        optional log file path
    DOTSYNC_LOG_FILE_LEVEL  log file level (default: console level)
    DOTSYNC_PLATFORM        platform string used instead of platform.system()
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "DOTSYNC_"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None
    platform: str | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (default: ``os.environ``).

    Empty values are treated as unset.
    """
    env = os.environ if environ is None else environ

    def _get(name: str) -> str | None:
        value = env.get(ENV_PREFIX + name, "").strip()
        return value or None

    return Settings(
        log_level=_get("LOG_LEVEL") or "WARNING",
        log_file=_get("LOG_FILE"),
        log_file_level=_get("LOG_FILE_LEVEL"),
        platform=_get("PLATFORM"),
    )
