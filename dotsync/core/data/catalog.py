"""
Dotfile catalog — the ordered list of entries this program manages.

Order is significant: entries are processed strictly in declaration
order, and two entries may share a path as long as their platform sets
keep them from being active in the same run (see ``find_overlaps``).
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

from dotsync.core.models.entry import Entry
from dotsync.core.models.platform import Platform

_ALL = frozenset({Platform.LINUX, Platform.MACOS, Platform.WINDOWS})
_UNIX = frozenset({Platform.LINUX, Platform.MACOS})
_WINDOWS = frozenset({Platform.WINDOWS})


CATALOG: tuple[Entry, ...] = (
    # ── All platforms ────────────────────────────────────────────
    Entry(repo_path="git/.gitconfig", home_path=".gitconfig", supported_os=_ALL),
    Entry(repo_path="git/.gitignore_global", home_path=".gitignore_global", supported_os=_ALL),
    # ── UNIX only ────────────────────────────────────────────────
    Entry(repo_path="nvim", home_path=".config/nvim", supported_os=_UNIX),
    Entry(repo_path=".zprofile", home_path=".zprofile", supported_os=_UNIX),
    Entry(repo_path=".zshrc", home_path=".zshrc", supported_os=_UNIX),
    Entry(repo_path=".tmux.conf", home_path=".tmux.conf", supported_os=_UNIX),
    # ── Windows only ─────────────────────────────────────────────
    Entry(repo_path="glazewm", home_path=".glzr/glazewm", supported_os=_WINDOWS),
    Entry(repo_path="zebar", home_path=".glzr/zebar", supported_os=_WINDOWS),
    Entry(repo_path="powershell", home_path="Documents/PowerShell", supported_os=_WINDOWS),
    Entry(repo_path="nvim", home_path="AppData/Local/nvim", supported_os=_WINDOWS),
    Entry(repo_path="idea/.ideavimrc", home_path=".ideavimrc", supported_os=_WINDOWS),
)


def entries_for(platform: Platform, catalog: Iterable[Entry] = CATALOG) -> list[Entry]:
    """Entries active on ``platform``, in declaration order."""
    return [entry for entry in catalog if entry.applies_to(platform)]


def _overlaps(a: str, b: str) -> bool:
    """Whether one relative path equals or contains the other."""
    pa = tuple(part for part in a.replace("\\", "/").split("/") if part)
    pb = tuple(part for part in b.replace("\\", "/").split("/") if part)
    shorter = min(len(pa), len(pb))
    return pa[:shorter] == pb[:shorter]


def find_overlaps(
    platform: Platform,
    catalog: Iterable[Entry] = CATALOG,
) -> list[tuple[Entry, Entry]]:
    """Pairs of entries active on ``platform`` whose paths collide.

    Two entries collide when their repo paths or their home paths are
    equal or nested inside one another; whichever runs second would
    overwrite part of what the first one copied.
    """
    active = entries_for(platform, catalog)
    return [
        (a, b)
        for a, b in combinations(active, 2)
        if _overlaps(a.repo_path, b.repo_path) or _overlaps(a.home_path, b.home_path)
    ]
