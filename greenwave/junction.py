"""Traffic light junctions and their locations."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass, field

from greenwave.green_interval import GreenInterval
from greenwave.phase import Phase


@dataclass(frozen=True)
class Point:
    """A point in 2D space, in metres."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Junction:
    """A signalised junction: its cycle of phases, offset and location."""

    cycle: list[Phase]
    _: KW_ONLY
    id: int = -1
    label: str = "-1"
    offset: int = 0
    point: Point = field(default_factory=Point)

    @property
    def total_duration(self) -> int:
        """Total duration of the cycle in seconds."""
        return sum(phase.total_seconds for phase in self.cycle)

    def green_intervals(self) -> list[GreenInterval]:
        """Green intervals of the cycle, ignoring the offset.

        Each GREEN or GREENPRIORITY signal yields one interval tagged with the
        index of its phase. An empty list is returned for a cycle with no
        positive duration.
        """
        cycle_duration = self.total_duration
        if cycle_duration <= 0:
            return []
        intervals = []
        current_time = 0
        for phase_idx, phase in enumerate(self.cycle):
            signal_start = current_time
            for signal in phase.signals:
                if signal.color.is_green:
                    start = signal_start
                    end = signal_start + signal.duration
                    if end != cycle_duration:
                        end %= cycle_duration
                    intervals.append(
                        GreenInterval(phase_idx, float(start % cycle_duration), float(end))
                    )
                signal_start += signal.duration
            current_time += phase.total_seconds
        return intervals