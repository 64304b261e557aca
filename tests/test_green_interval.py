import pytest

from greenwave.green_interval import GreenInterval


@pytest.mark.parametrize(
    "one, two, expected",
    [
        ((0, 20, 48), (0, 22.5, 32.5), (0, 22.5, 32.5)),
        ((0, 20, 48), (0, 39.5, 55), (0, 39.5, 48)),
        ((0, 45, 55), (0, 51.5, 55), (0, 51.5, 55)),
        ((1, 62, 70.5), (1, 62, 71.5), (1, 62, 70.5)),
        ((0, 20, 48), (0, 29, 32.5), (0, 29, 32.5)),
        ((1, 62, 70.5), (1, 62, 70.5), (1, 62, 70.5)),
        ((0, 20, 48), (0, 39.5, 48), (0, 39.5, 48)),
    ],
)
def test_can_connect(one, two, expected):
    connected = GreenInterval(*one).can_connect(GreenInterval(*two))
    assert connected is not None
    assert connected.phase_idx == expected[0]
    assert connected.start == pytest.approx(expected[1], abs=0.01)
    assert connected.end == pytest.approx(expected[2], abs=0.01)


def test_disjoint_intervals_do_not_connect():
    assert GreenInterval(0, 0, 10).can_connect(GreenInterval(0, 20, 30)) is None


def test_touching_intervals_do_not_connect():
    assert GreenInterval(0, 0, 10).can_connect(GreenInterval(0, 10, 30)) is None


def test_overlap_within_eps_does_not_connect():
    assert GreenInterval(0, 0, 10.005).can_connect(GreenInterval(0, 10, 30)) is None


def test_overlap_takes_own_phase():
    connected = GreenInterval(3, 0, 10).can_connect(GreenInterval(5, 5, 20))
    assert connected == GreenInterval(3, 5, 10)


def test_can_connect_does_not_modify_inputs():
    one = GreenInterval(0, 20, 48)
    two = GreenInterval(0, 22.5, 32.5)
    one.can_connect(two)
    assert one == GreenInterval(0, 20, 48)
    assert two == GreenInterval(0, 22.5, 32.5)