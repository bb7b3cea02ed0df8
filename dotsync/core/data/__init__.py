"""
Static data compiled into the program.

The dotfile catalog lives in :mod:`dotsync.core.data.catalog`; it is not
externally configurable.
"""

from dotsync.core.data.catalog import CATALOG, entries_for, find_overlaps

__all__ = ["CATALOG", "entries_for", "find_overlaps"]
