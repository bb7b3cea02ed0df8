"""
Run context — the repository and home roots for the current process.

The roots are resolved once at startup by the CLI and are read-only
afterwards:

    - CLI:    main.py   → context.set_roots(resolve_roots())
    - Tests:  conftest  → context.set_roots(Roots(...)) / reset_roots()

Module-level singleton, like the rest of the process-wide state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotsync.core.models.entry import Roots

_roots: Optional[Roots] = None


def resolve_roots(repo_root: Path | None = None, home_root: Path | None = None) -> Roots:
    """Resolve absolute roots: the working directory and the user's home."""
    repo = (repo_root or Path.cwd()).absolute()
    home = (home_root or Path.home()).absolute()
    return Roots(repo_root=repo, home_root=home)


def set_roots(roots: Roots) -> None:
    """Register the roots for the current process."""
    global _roots
    _roots = roots


def get_roots() -> Optional[Roots]:
    """Return the registered roots, or None if not yet set."""
    return _roots


def reset_roots() -> None:
    global _roots
    _roots = None
