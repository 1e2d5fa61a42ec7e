"""
Event level enumeration
"""

from enum import IntEnum
from typing import Dict


class Level(IntEnum):
    """
    Event level enumeration.

    Ordinals follow declaration order, not severity. Consumers index
    by ordinal, so the order must not change.
    """

    SUCCESS = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        """String representation of the level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            Level enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color(self) -> str:
        """Display color name for this level."""
        return LEVEL_COLORS[self]

    @property
    def marker(self) -> str:
        """Single-glyph marker used when rendering events."""
        return LEVEL_MARKERS[self]


LEVEL_COLORS: Dict[Level, str] = {
    Level.SUCCESS: "green",
    Level.DEBUG: "brown",
    Level.INFO: "blue",
    Level.WARNING: "yellow",
    Level.ERROR: "red",
    Level.FATAL: "purple",
}

LEVEL_MARKERS: Dict[Level, str] = {
    Level.SUCCESS: "\U0001F7E2",  # green circle
    Level.DEBUG: "\U0001F7E4",    # brown circle
    Level.INFO: "\U0001F535",     # blue circle
    Level.WARNING: "\U0001F7E1",  # yellow circle
    Level.ERROR: "\U0001F534",    # red circle
    Level.FATAL: "\U0001F7E3",    # purple circle
}
