"""
Entry model — one static mapping between the repository and the home directory.

Entries are declared once in the catalog and never mutated. They carry
relative path fragments only; absolute paths are produced by resolving
against the run's :class:`Roots`.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, field_validator

from dotsync.core.models.platform import Direction, Platform


class Roots(BaseModel):
    """The two absolute roots a run resolves entries against."""

    model_config = ConfigDict(frozen=True)

    repo_root: Path
    home_root: Path

    @field_validator("repo_root", "home_root")
    @classmethod
    def _must_be_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"root must be absolute: {value}")
        return value


class Entry(BaseModel):
    """A repository path, a home path and the platforms the pair applies to."""

    model_config = ConfigDict(frozen=True)

    repo_path: str
    home_path: str
    supported_os: frozenset[Platform]

    @field_validator("repo_path", "home_path")
    @classmethod
    def _must_be_relative(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be empty")
        # Reject both POSIX and Windows absolute forms regardless of host
        if value.startswith(("/", "\\")) or PurePath(value).is_absolute() or (
            len(value) > 1 and value[1] == ":"
        ):
            raise ValueError(f"path must be relative: {value}")
        return value

    @field_validator("supported_os")
    @classmethod
    def _must_not_be_empty(cls, value: frozenset[Platform]) -> frozenset[Platform]:
        if not value:
            raise ValueError("supported_os must name at least one platform")
        return value

    def applies_to(self, platform: Platform) -> bool:
        """Whether this entry is active on ``platform``."""
        return platform in self.supported_os

    def repo_location(self, roots: Roots) -> Path:
        return roots.repo_root / self.repo_path

    def home_location(self, roots: Roots) -> Path:
        return roots.home_root / self.home_path

    def source_and_target(self, direction: Direction, roots: Roots) -> tuple[Path, Path]:
        """Absolute ``(source, target)`` for a copy in ``direction``."""
        if direction is Direction.WRITE:
            return self.repo_location(roots), self.home_location(roots)
        return self.home_location(roots), self.repo_location(roots)

    def __str__(self) -> str:
        platforms = ",".join(p.value for p in Platform if p in self.supported_os)
        return f"{self.repo_path} <-> {self.home_path} [{platforms}]"
