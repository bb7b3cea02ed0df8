"""
Platform and direction enums.

A run is parameterised by exactly two choices: which operating system
the catalog is filtered for, and which way the copy flows.
"""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """Operating systems an entry can apply to."""

    LINUX = "LINUX"
    MACOS = "MACOS"
    WINDOWS = "WINDOWS"


class Direction(StrEnum):
    """Copy direction selected by the command-line verb.

    WRITE publishes repository copies into the home directory.
    SYNC captures home-directory copies back into the repository.
    """

    WRITE = "WRITE"
    SYNC = "SYNC"

    @classmethod
    def parse(cls, value: str) -> Direction:
        """Case-insensitive lookup by verb (``write`` / ``sync``).

        Raises:
            ValueError: If ``value`` names no direction.
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown command: {value}") from None
