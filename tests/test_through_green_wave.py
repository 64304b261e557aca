import pytest

from greenwave.green_interval import GreenInterval
from greenwave.through_green_wave import ThroughGreenWave


def sample_intervals():
    return [
        GreenInterval(0, 11, 14.5),
        GreenInterval(0, 29, 32.5),
        GreenInterval(0, 51.5, 55),
        GreenInterval(1, 65, 68.5),
    ]


def test_depth_is_number_of_intervals():
    intervals = sample_intervals()
    wave = ThroughGreenWave(intervals)
    assert wave.depth == len(intervals)


def test_bandwidth_is_shortest_interval():
    intervals = [GreenInterval(0, 0, 30), GreenInterval(0, 20, 25), GreenInterval(1, 40, 60)]
    wave = ThroughGreenWave(intervals)
    durations = [i.end - i.start for i in intervals]
    assert wave.bandwidth in durations
    assert all(wave.bandwidth <= d for d in durations)


def test_empty_wave_has_zero_bandwidth():
    wave = ThroughGreenWave([])
    assert wave.bandwidth == 0
    assert wave.depth == 0


def test_single_interval_bandwidth():
    wave = ThroughGreenWave([GreenInterval(0, 10.0, 25.5)])
    assert wave.bandwidth == pytest.approx(15.5)
    assert wave.depth == 1


def test_equal_waves_compare_equal():
    assert ThroughGreenWave(sample_intervals()) == ThroughGreenWave(sample_intervals())
    assert ThroughGreenWave(sample_intervals()) != ThroughGreenWave(sample_intervals()[:2])