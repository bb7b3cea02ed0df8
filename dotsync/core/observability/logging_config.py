"""
Logging setup for the dotsync CLI.

main.py calls ``setup_logging`` once per run; every module logs through
``logging.getLogger(__name__)``.

What lands where:

    stderr   per-entry failures (ERROR) at the default level, plus
             run summaries with --verbose and per-file copy lines
             with --debug
    file     DOTSYNC_LOG_FILE, at DOTSYNC_LOG_FILE_LEVEL (or the console
             level), always with timestamps and source locations

Console level precedence: --debug > --verbose > --quiet > DOTSYNC_LOG_LEVEL > WARNING.
"""

from __future__ import annotations

import logging
import sys

_DATEFMT_SHORT = "%H:%M:%S"
_DATEFMT_FULL = "%Y-%m-%d %H:%M:%S"

_FMT_LOCATED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"


def _console_formatter(level: int) -> logging.Formatter:
    """Bare messages by default; more context as the level drops."""
    if level <= logging.DEBUG:
        return logging.Formatter(_FMT_LOCATED, datefmt=_DATEFMT_SHORT)
    if level <= logging.INFO:
        return logging.Formatter("%(asctime)s [%(name)s] %(message)s", datefmt=_DATEFMT_SHORT)
    return logging.Formatter("%(message)s")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install the console handler and, optionally, a file handler on the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    handlers: list[logging.Handler] = [console]
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(_parse_level(log_file_level) if log_file_level else console_level)
        fh.setFormatter(logging.Formatter(_FMT_LOCATED, datefmt=_DATEFMT_FULL))
        handlers.append(fh)

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        if isinstance(old, logging.FileHandler):
            old.close()
    for handler in handlers:
        root.addHandler(handler)
    # Root passes everything any handler wants; handlers do the filtering
    root.setLevel(min(h.level for h in handlers))

    # A closed stderr (e.g. piped into head) must not turn into tracebacks
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name → numeric level; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
