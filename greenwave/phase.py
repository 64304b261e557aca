"""Traffic light phases."""

from __future__ import annotations

from dataclasses import dataclass, field

from greenwave.signal import Signal


@dataclass
class Phase:
    """A phase of a traffic light cycle: an identifier and its signals in order."""

    id: int
    signals: list[Signal] = field(default_factory=list)

    @property
    def total_seconds(self) -> int:
        """Total duration of the phase in seconds."""
        return sum(signal.duration for signal in self.signals)