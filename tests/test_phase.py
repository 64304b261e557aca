from greenwave.color import Color
from greenwave.phase import Phase
from greenwave.signal import Signal


def test_total_seconds_is_sum_of_signals():
    signals = [Signal(30, Color.GREEN), Signal(20, Color.RED)]
    phase = Phase(0, signals)
    assert phase.total_seconds == sum(s.duration for s in signals)
    assert phase.id == 0


def test_empty_phase_has_zero_duration():
    assert Phase(7).total_seconds == 0


def test_total_seconds_follows_signals():
    phase = Phase(1, [Signal(10, Color.RED)])
    before = phase.total_seconds
    phase.signals.append(Signal(5, Color.YELLOW))
    assert phase.total_seconds == before + 5