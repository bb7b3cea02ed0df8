"""
Receipt model — the outcome of processing one catalog entry.

The copy engine returns receipts for work it did or skipped; the
orchestrator turns a propagated I/O error into a failure receipt.
Whatever happens to an entry, the run ends up with exactly one
receipt for it.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


def utc_now() -> datetime:
    return datetime.now(UTC)


def timing(started: datetime) -> dict[str, Any]:
    """``started_at``, ``ended_at`` and ``duration_ms`` for work begun at ``started``.

    The duration is derived from the two timestamps so the three fields agree.
    """
    ended = utc_now()
    return {
        "started_at": started.isoformat(),
        "ended_at": ended.isoformat(),
        "duration_ms": int((ended - started).total_seconds() * 1000),
    }


class Receipt(BaseModel):
    """Result of copying one source path to one target path."""

    status: Literal["ok", "skipped", "failed"] = "ok"
    kind: Literal["file", "directory", "missing"] = "file"

    source: str
    target: str
    entry: str = ""                 # identity of the catalog entry, when known

    files_copied: int = 0
    dirs_created: int = 0

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the copy succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the copy failed."""
        return self.status == "failed"

    @property
    def skipped(self) -> bool:
        return self.status == "skipped"

    @classmethod
    def success(
        cls,
        source: str,
        target: str,
        kind: Literal["file", "directory"],
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(status="ok", kind=kind, source=source, target=target, **kwargs)

    @classmethod
    def failure(
        cls,
        source: str,
        target: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(status="failed", source=source, target=target, error=error, **kwargs)

    @classmethod
    def skip(cls, source: str, target: str, **kwargs: Any) -> Receipt:
        """Create a skip receipt for a source that does not exist."""
        return cls(status="skipped", kind="missing", source=source, target=target, **kwargs)
