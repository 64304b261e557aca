import pytest

from greenwave.color import Color
from greenwave.green_interval import GreenInterval
from greenwave.junction import Junction, Point
from greenwave.phase import Phase
from greenwave.signal import Signal


def basic_junctions():
    return [
        Junction(
            [
                Phase(0, [Signal(30, Color.GREEN), Signal(20, Color.RED)]),
                Phase(1, [Signal(20, Color.GREEN), Signal(15, Color.RED)]),
            ],
            point=Point(0, 0),
        ),
        Junction(
            [
                Phase(10, [Signal(20, Color.RED), Signal(35, Color.GREEN), Signal(5, Color.YELLOW)]),
                Phase(11, [Signal(10, Color.RED), Signal(10, Color.GREEN), Signal(5, Color.YELLOW)]),
            ],
            point=Point(0, 200),
        ),
        Junction(
            [
                Phase(20, [Signal(45, Color.RED), Signal(10, Color.GREEN)]),
                Phase(21, [Signal(7, Color.RED), Signal(18, Color.GREEN), Signal(5, Color.YELLOW)]),
            ],
            point=Point(0, 450),
        ),
        Junction(
            [
                Phase(20, [Signal(40, Color.RED), Signal(15, Color.GREEN)]),
                Phase(21, [Signal(10, Color.RED), Signal(20, Color.GREEN)]),
            ],
            point=Point(0, 600),
        ),
    ]


def test_cycle_duration_correctness():
    for junction in basic_junctions():
        assert junction.total_duration == 85


EXPECTED_INTERVALS = [
    [GreenInterval(0, 0, 30), GreenInterval(1, 50, 70)],
    [GreenInterval(0, 20, 55), GreenInterval(1, 70, 80)],
    [GreenInterval(0, 45, 55), GreenInterval(1, 62, 80)],
    [GreenInterval(0, 40, 55), GreenInterval(1, 65, 85)],
]


@pytest.mark.parametrize("index", range(4))
def test_green_intervals(index):
    junction = basic_junctions()[index]
    assert junction.green_intervals() == EXPECTED_INTERVALS[index]


def test_green_interval_ending_at_cycle_end_keeps_full_end():
    junction = basic_junctions()[3]
    last = junction.green_intervals()[-1]
    assert last.end == junction.total_duration


def test_empty_cycle_has_no_green_intervals():
    assert Junction([]).green_intervals() == []


def test_zero_length_cycle_has_no_green_intervals():
    junction = Junction([Phase(0, [Signal(0, Color.GREEN)])])
    assert junction.green_intervals() == []


def test_priority_green_counts_and_right_green_does_not():
    junction = Junction(
        [Phase(0, [Signal(10, Color.GREENPRIORITY), Signal(10, Color.GREENRIGHT), Signal(10, Color.RED)])]
    )
    assert junction.green_intervals() == [GreenInterval(0, 0, 10)]


def test_defaults():
    junction = Junction([])
    assert junction.id == -1
    assert junction.label == "-1"
    assert junction.offset == 0
    assert junction.point == Point(0, 0)


def test_options_are_applied():
    junction = Junction([], id=5, label="north", point=Point(1.5, 2.5))
    assert (junction.id, junction.label) == (5, "north")
    assert junction.point == Point(1.5, 2.5)


def test_offset_is_assignable_and_ignored_by_green_intervals():
    junction = basic_junctions()[0]
    junction.offset = 17
    assert junction.offset == 17
    assert junction.green_intervals() == EXPECTED_INTERVALS[0]