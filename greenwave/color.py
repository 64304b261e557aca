"""Traffic light signal colours."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """State of a single traffic light signal."""

    UNDEFINED = 0
    RED = 1
    YELLOW = 2
    GREEN = 3
    GREENPRIORITY = 4
    GREENRIGHT = 5
    REDYELLOW = 6
    BLINKING = 7
    NO = 8

    @property
    def is_green(self) -> bool:
        """Whether vehicles may pass on this colour when green waves are built."""
        return self in (Color.GREEN, Color.GREENPRIORITY)

    def __str__(self) -> str:
        return self.name.lower()