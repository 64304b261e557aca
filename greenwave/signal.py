"""Traffic light signals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from greenwave.color import Color


@dataclass
class Signal:
    """A signal of a given colour shown for a number of seconds.

    The minimum and maximum durations default to the duration itself and
    bound the signal during timing optimisation.
    """

    duration: int
    color: Color
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_duration is None:
            self.min_duration = self.duration
        if self.max_duration is None:
            self.max_duration = self.duration