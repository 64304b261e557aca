"""Green waves between pairs of neighbouring junctions."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from itertools import pairwise
from typing import Iterable, Sequence

from greenwave.green_interval import GreenInterval
from greenwave.junction import Junction


@dataclass
class GreenWave:
    """A green wave from one junction to the next.

    ``interval_jun_one`` is the departure window at the first junction and
    ``interval_jun_two`` the matching arrival window at the second one.
    Distance is in metres, travel time and bandwidth in seconds.
    """

    interval_jun_one: GreenInterval
    interval_jun_two: GreenInterval
    distance: float
    travel_time: float
    bandwidth: float

    @classmethod
    def create(
        cls,
        interval_one: GreenInterval,
        interval_two: GreenInterval,
        distance: float,
        travel_time: float,
    ) -> GreenWave:
        """Build a wave from copies of the intervals; bandwidth is the first interval's length."""
        return cls(
            replace(interval_one),
            replace(interval_two),
            distance,
            travel_time,
            interval_one.end - interval_one.start,
        )

    def clone(self) -> GreenWave:
        """Return a deep copy of the wave."""
        return replace(
            self,
            interval_jun_one=replace(self.interval_jun_one),
            interval_jun_two=replace(self.interval_jun_two),
        )


def find_green_waves_between_intervals(
    intervals_one: Iterable[GreenInterval],
    intervals_two: Sequence[GreenInterval],
    distance: float,
    travel_time: float,
) -> list[GreenWave]:
    """Find waves leaving during ``intervals_one`` and arriving during ``intervals_two``."""
    waves = []
    for one in intervals_one:
        first_arrival = one.start + travel_time
        last_arrival = one.end + travel_time
        for two in intervals_two:
            overlap_start = max(first_arrival, two.start)
            overlap_end = min(last_arrival, two.end)
            if overlap_start >= overlap_end:
                continue
            departure_start = overlap_start - travel_time
            departure_end = overlap_end - travel_time
            if one.start <= departure_start < departure_end <= one.end:
                waves.append(
                    GreenWave.create(
                        GreenInterval(one.phase_idx, departure_start, departure_end),
                        GreenInterval(two.phase_idx, overlap_start, overlap_end),
                        distance,
                        travel_time,
                    )
                )
    return waves


def _truncated_mod(value: int, modulus: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    return int(math.fmod(value, modulus))


def _shifted_intervals(junction: Junction) -> list[GreenInterval]:
    """Green intervals moved by the junction offset, split where they wrap the cycle."""
    cycle = junction.total_duration
    shifted = []
    for interval in junction.green_intervals():
        start = _truncated_mod(int(interval.start) + junction.offset, cycle)
        end = _truncated_mod(int(interval.end) + junction.offset, cycle)
        if end < start:
            shifted.append(GreenInterval(interval.phase_idx, float(start), float(cycle)))
            shifted.append(GreenInterval(interval.phase_idx, 0.0, float(end)))
        else:
            shifted.append(GreenInterval(interval.phase_idx, float(start), float(end)))
    return shifted


def find_green_waves(
    junctions: Sequence[Junction], desired_speed_kmh: float
) -> list[list[GreenWave]]:
    """Find the green waves of every segment between consecutive junctions.

    The result holds one list of waves per segment, in junction order.
    """
    if not junctions:
        raise ValueError("at least one junction is required")
    speed_ms = desired_speed_kmh / 3.6
    segments = []
    for one, two in pairwise(junctions):
        dx = one.point.x - two.point.x
        dy = one.point.y - two.point.y
        distance = math.sqrt(dx * dx + dy * dy)
        travel_time = distance / speed_ms
        segments.append(
            find_green_waves_between_intervals(
                _shifted_intervals(one), _shifted_intervals(two), distance, travel_time
            )
        )
    return segments