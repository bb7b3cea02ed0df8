"""
Domain models for dotsync.

All models are re-exported here for convenient access:

    from dotsync.core.models import Direction, Entry, Platform, Receipt, Roots
"""

from dotsync.core.models.entry import Entry, Roots
from dotsync.core.models.platform import Direction, Platform
from dotsync.core.models.receipt import Receipt

__all__ = [
    # platform.py
    "Direction",
    # entry.py
    "Entry",
    "Platform",
    # receipt.py
    "Receipt",
    "Roots",
]
