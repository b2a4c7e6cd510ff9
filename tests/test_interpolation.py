import pytest

from argoslib.interpolation import InterpMapPoint, InterpolationMap

POINTS = [
    InterpMapPoint(0.0, 0.0),
    InterpMapPoint(10.0, 100.0),
    InterpMapPoint(20.0, 150.0),
    InterpMapPoint(30.0, 400.0),
]


@pytest.fixture
def interp():
    return InterpolationMap(POINTS)


@pytest.mark.parametrize("point", POINTS)
def test_exact_points_map_to_outputs(interp, point):
    assert interp.map(point.in_val) == pytest.approx(point.out_val)


def test_midpoint(interp):
    assert interp.map(5.0) == pytest.approx(50.0)


def test_clamps_below_and_above(interp):
    assert interp.map(-100.0) == POINTS[0].out_val
    assert interp.map(1000.0) == POINTS[-1].out_val


def test_monotone_outputs(interp):
    inputs = [x * 0.5 for x in range(-10, 70)]
    outputs = [interp(x) for x in inputs]
    assert outputs == sorted(outputs)


@pytest.mark.parametrize("x", [1.0, 12.5, 27.0])
def test_result_between_neighbours(interp, x):
    lower = max(p for p in POINTS if p.in_val <= x)
    upper = min(p for p in POINTS if p.in_val >= x)
    assert lower.out_val <= interp(x) <= upper.out_val


def test_call_matches_map(interp):
    for x in (-1.0, 3.3, 17.0, 25.0, 31.0):
        assert interp(x) == interp.map(x)


def test_accepts_tuples():
    interp = InterpolationMap([(0.0, 1.0), (2.0, 3.0)])
    assert interp(0.0) == 1.0
    assert interp(2.0) == 3.0
    assert interp.points[1] == InterpMapPoint(2.0, 3.0)


def test_single_point_map_is_constant():
    interp = InterpolationMap([InterpMapPoint(4.0, 7.0)])
    assert interp(-5.0) == 7.0
    assert interp(4.0) == 7.0
    assert interp(50.0) == 7.0


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        InterpolationMap([])


def test_unsorted_map_rejected():
    with pytest.raises(ValueError):
        InterpolationMap([InterpMapPoint(5.0, 0.0), InterpMapPoint(1.0, 1.0)])


def test_points_order_by_input():
    assert InterpMapPoint(1.0, 99.0) < InterpMapPoint(2.0, 0.0)
    assert InterpMapPoint(1.0, 5.0) == InterpMapPoint(1.0, 6.0)