"""
Platform detection — classify the host as LINUX, MACOS or WINDOWS.

Pure logic over a platform-identifier string. Never raises: anything
unrecognised (BSDs, Solaris, an empty string) is treated as LINUX.
"""

from __future__ import annotations

import logging
import platform as _platform

from dotsync.core.config.settings import load_settings
from dotsync.core.models.platform import Platform

logger = logging.getLogger(__name__)


def platform_string() -> str:
    """The raw platform identifier: DOTSYNC_PLATFORM, else ``platform.system()``."""
    override = load_settings().platform
    if override:
        return override
    return _platform.system()


def classify(name: str) -> Platform:
    """Map a platform identifier to a :class:`Platform`, case-insensitively."""
    lowered = name.lower()
    # "darwin" contains "win", so macOS must be matched first
    if "darwin" in lowered or "mac" in lowered:
        return Platform.MACOS
    if "win" in lowered:
        return Platform.WINDOWS
    # Diagnostic only: LINUX is the fallback, not a matched signature
    if "linux" not in lowered:
        logger.debug("Unrecognised platform %r, assuming LINUX", name)
    return Platform.LINUX


def detect_os(platform_name: str | None = None) -> Platform:
    """Detect the current platform.

    Args:
        platform_name: Identifier to classify instead of the host's.
    """
    name = platform_string() if platform_name is None else platform_name
    result = classify(name)
    logger.debug("Platform %r classified as %s", name, result)
    return result
