from argoslib.hysteresis_filter import HysteresisFilter


def test_starts_inactive():
    filt = HysteresisFilter(1.0, 2.0)
    assert filt(1.5) is False
    assert filt.state is False


def test_activates_above_threshold():
    filt = HysteresisFilter(1.0, 2.0)
    assert filt(2.5) is True


def test_thresholds_are_strict():
    filt = HysteresisFilter(1.0, 2.0)
    assert filt(2.0) is False
    assert filt(2.01) is True
    assert filt(1.0) is True
    assert filt(0.99) is False


def test_holds_state_in_band():
    filt = HysteresisFilter(1.0, 2.0)
    assert filt(3.0) is True
    assert filt(1.5) is True
    assert filt(0.5) is False
    assert filt(1.5) is False


def test_integer_thresholds():
    filt = HysteresisFilter(10, 20)
    results = [filt(v) for v in (5, 15, 25, 15, 12, 9, 15)]
    assert results == [False, False, True, True, True, False, False]