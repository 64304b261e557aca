"""Green waves that pass through a sequence of junctions."""

from __future__ import annotations

from dataclasses import dataclass, field

from greenwave.green_interval import GreenInterval


@dataclass
class ThroughGreenWave:
    """Green intervals, one per junction, forming a single through wave.

    The bandwidth is fixed at construction as the shortest interval length,
    or zero when there are no intervals.
    """

    intervals: list[GreenInterval]
    _bandwidth: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._bandwidth = min(
            (interval.end - interval.start for interval in self.intervals), default=0.0
        )

    @property
    def depth(self) -> int:
        """Number of junctions the wave passes through."""
        return len(self.intervals)

    @property
    def bandwidth(self) -> float:
        """Shortest green interval of the wave, in seconds."""
        return self._bandwidth