"""Chaining segment green waves into through green waves."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import NamedTuple, Sequence

from greenwave.green_interval import GreenInterval
from greenwave.green_wave import GreenWave
from greenwave.through_green_wave import ThroughGreenWave


class WaveID(NamedTuple):
    """Position of a wave: its segment and its index within the segment."""

    segment_idx: int
    wave_idx: int


@dataclass
class GreenWaveChain:
    """Waves of consecutive segments that connect into one route."""

    green_waves: list[GreenWave] = field(default_factory=list)


def _connection(wave_from: GreenWave, wave_to: GreenWave) -> GreenInterval | None:
    """Overlap of the arrival of ``wave_from`` with the departure of ``wave_to``, same phase only."""
    if wave_from.interval_jun_two.phase_idx != wave_to.interval_jun_one.phase_idx:
        return None
    return wave_from.interval_jun_two.can_connect(wave_to.interval_jun_one)


def find_wave_connections(
    segments: Sequence[Sequence[GreenWave]],
) -> dict[WaveID, list[WaveID]]:
    """Map every wave, except those of the last segment, to the waves it connects to."""
    connections: dict[WaveID, list[WaveID]] = {}
    for seg_idx, (current, following) in enumerate(pairwise(segments)):
        for from_idx, wave_from in enumerate(current):
            connections[WaveID(seg_idx, from_idx)] = [
                WaveID(seg_idx + 1, to_idx)
                for to_idx, wave_to in enumerate(following)
                if _connection(wave_from, wave_to) is not None
            ]
    return connections


def build_chains(
    wave_id: WaveID,
    connections: dict[WaveID, list[WaveID]],
    current_path: Sequence[WaveID],
) -> list[list[WaveID]]:
    """Every path that extends ``current_path`` from ``wave_id`` until no connection is left."""
    next_waves = connections.get(wave_id)
    if not next_waves:
        return [list(current_path)]
    chains = []
    for next_id in next_waves:
        chains.extend(build_chains(next_id, connections, [*current_path, next_id]))
    return chains


def adjust_wave_by_connection(
    wave_from: GreenWave, wave_to: GreenWave, overlap: GreenInterval
) -> GreenWave:
    """Copy of ``wave_to`` narrowed so that its departure window is ``overlap``."""
    adjusted = wave_to.clone()
    delta_start = overlap.start - wave_to.interval_jun_one.start
    delta_end = overlap.end - wave_to.interval_jun_one.end
    adjusted.interval_jun_one = overlap
    adjusted.interval_jun_two.start += delta_start
    adjusted.interval_jun_two.end += delta_end
    adjusted.bandwidth = adjusted.interval_jun_two.end - adjusted.interval_jun_two.start
    return adjusted


def create_adjusted_segments(
    segments: Sequence[Sequence[GreenWave]],
) -> list[list[GreenWave]]:
    """Segments in which every wave after the first segment is narrowed to its connections.

    A wave of a later segment appears once for every wave of the previous
    adjusted segment it connects to; waves without a connection are dropped.
    """
    if not segments:
        return []
    adjusted = [[wave.clone() for wave in segments[0]]]
    for segment in segments[1:]:
        previous = adjusted[-1]
        narrowed = []
        for wave_from in previous:
            for wave_to in segment:
                overlap = _connection(wave_from, wave_to)
                if overlap is not None:
                    narrowed.append(adjust_wave_by_connection(wave_from, wave_to, overlap))
        adjusted.append(narrowed)
    return adjusted


def extract_chains(segments: Sequence[Sequence[GreenWave]]) -> list[GreenWaveChain]:
    """All chains of at least two connected waves that start in the first segment."""
    if not segments:
        raise ValueError("at least one segment is required")
    adjusted = create_adjusted_segments(segments)
    connections = find_wave_connections(adjusted)
    chains = []
    for wave_idx in range(len(adjusted[0])):
        start = WaveID(0, wave_idx)
        for path in build_chains(start, connections, [start]):
            if len(path) < 2:
                continue
            chains.append(
                GreenWaveChain([adjusted[wid.segment_idx][wid.wave_idx] for wid in path])
            )
    return chains


def merge_green_waves(segments: Sequence[Sequence[GreenWave]]) -> list[ThroughGreenWave]:
    """Merge connected waves into through waves spanning at least two segments."""
    through_waves = []
    for chain in extract_chains(segments):
        if len(chain.green_waves) < 2:
            continue
        waves = [wave.clone() for wave in chain.green_waves]
        for previous, current in reversed(list(pairwise(waves))):
            intersection = previous.interval_jun_two.can_connect(current.interval_jun_one)
            if intersection is None:
                continue
            current.interval_jun_one = intersection
            delta_start = intersection.start - previous.interval_jun_two.start
            delta_end = intersection.end - previous.interval_jun_two.end
            previous.interval_jun_two.start = intersection.start
            previous.interval_jun_two.end = intersection.end
            previous.interval_jun_one.start += delta_start
            previous.interval_jun_one.end += delta_end
            previous.bandwidth = previous.interval_jun_two.end - previous.interval_jun_two.start
        intervals = [waves[0].interval_jun_one, *(wave.interval_jun_two for wave in waves)]
        through_waves.append(ThroughGreenWave(intervals))
    return through_waves