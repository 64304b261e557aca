"""Green intervals of traffic light phases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

EPS = 0.01


@dataclass
class GreenInterval:
    """A span of time, in seconds, during which a phase shows green."""

    phase_idx: int
    start: float
    end: float

    def can_connect(self, other: GreenInterval) -> Optional[GreenInterval]:
        """Return the overlap with ``other`` if it is longer than EPS, else None.

        The overlap keeps this interval's phase index.
        """
        overlap_start = max(self.start, other.start)
        overlap_end = min(self.end, other.end)
        if overlap_end - overlap_start > EPS:
            return GreenInterval(self.phase_idx, overlap_start, overlap_end)
        return None