"""
Sync use case — run one direction over the whole catalog.

Loads nothing and persists nothing: resolves the roots, detects the
platform, then copies every applicable entry in declaration order.
A failing entry is recorded and the run moves on to the next one;
nothing is rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from dotsync.core import context
from dotsync.core.data.catalog import CATALOG, entries_for, find_overlaps
from dotsync.core.models.entry import Entry, Roots
from dotsync.core.models.platform import Direction, Platform
from dotsync.core.models.receipt import Receipt, timing, utc_now
from dotsync.core.services.copy_ops import copy_path
from dotsync.core.services.detection import detect_os

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Result of one pass over the catalog."""

    direction: Direction
    platform: Platform
    roots: Roots
    receipts: list[Receipt] = field(default_factory=list)

    @property
    def copied(self) -> list[Receipt]:
        return [r for r in self.receipts if r.ok]

    @property
    def skipped(self) -> list[Receipt]:
        return [r for r in self.receipts if r.skipped]

    @property
    def failed(self) -> list[Receipt]:
        return [r for r in self.receipts if r.failed]

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.value,
            "platform": self.platform.value,
            "repo_root": str(self.roots.repo_root),
            "home_root": str(self.roots.home_root),
            "receipts": [r.model_dump() for r in self.receipts],
        }


def process_entry(entry: Entry, direction: Direction, roots: Roots) -> Receipt:
    """Copy one entry in ``direction``, converting I/O errors into a failure receipt."""
    source, target = entry.source_and_target(direction, roots)
    started = utc_now()
    try:
        receipt = copy_path(source, target)
    except OSError as e:
        logger.error("Failed to process: %s\n   %s", entry, e)
        logger.debug("Traceback for %s", entry, exc_info=True)
        return Receipt.failure(
            str(source), str(target), error=str(e), entry=str(entry), **timing(started)
        )
    receipt.entry = str(entry)
    return receipt


def run_sync(
    direction: Direction,
    *,
    roots: Roots | None = None,
    platform: Platform | None = None,
    catalog: Iterable[Entry] = CATALOG,
    on_receipt: Callable[[Receipt], None] | None = None,
) -> SyncResult:
    """Copy every catalog entry that applies to the current platform.

    Args:
        direction: WRITE (repository → home) or SYNC (home → repository).
        roots: Roots to resolve entries against. Defaults to the roots
            registered in :mod:`dotsync.core.context`, else cwd/home.
        platform: Platform to filter for. Defaults to detection.
        catalog: Entries to process, in order.
        on_receipt: Called with each receipt as soon as its entry is done.
    """
    if roots is None:
        roots = context.get_roots() or context.resolve_roots()
    if platform is None:
        platform = detect_os()

    catalog = tuple(catalog)
    for a, b in find_overlaps(platform, catalog):
        logger.warning("Entries overlap on %s: %s / %s", platform, a, b)

    active = entries_for(platform, catalog)
    logger.info(
        "%s on %s: %d of %d entries apply", direction, platform, len(active), len(catalog)
    )

    result = SyncResult(direction=direction, platform=platform, roots=roots)
    for entry in active:
        receipt = process_entry(entry, direction, roots)
        result.receipts.append(receipt)
        if on_receipt is not None:
            on_receipt(receipt)

    logger.info(
        "%s finished: %d copied, %d skipped, %d failed",
        direction, len(result.copied), len(result.skipped), len(result.failed),
    )
    return result
