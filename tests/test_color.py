import pytest

from argoslib.color import (
    COLORS,
    GAMMA_CORRECTED_COLORS,
    ArgosColor,
    gamma_correct,
)


def test_gamma_correct_pinned_values():
    assert gamma_correct(ArgosColor(27, 28, 128)) == ArgosColor(0, 1, 37)
    assert gamma_correct(ArgosColor(180, 0, 255)) == ArgosColor(96, 0, 255)


def test_gamma_correct_is_monotonic():
    corrected = [gamma_correct(ArgosColor(v, v, v)).r for v in range(256)]
    assert corrected == sorted(corrected)
    assert corrected[0] == 0
    assert corrected[255] == 255


def test_gamma_correct_extremes():
    assert gamma_correct(ArgosColor(0, 255, 0)) == ArgosColor(0, 255, 0)


def test_gamma_correct_white():
    assert GAMMA_CORRECTED_COLORS["white"] == ArgosColor(31, 31, 31)


def test_gamma_correct_never_brightens():
    for color in COLORS.values():
        corrected = gamma_correct(color)
        assert corrected.r <= color.r
        assert corrected.g <= color.g
        assert corrected.b <= color.b


def test_corrected_table_matches_function():
    assert set(GAMMA_CORRECTED_COLORS) == set(COLORS)
    for name, color in COLORS.items():
        assert GAMMA_CORRECTED_COLORS[name] == gamma_correct(color)


@pytest.mark.parametrize("bad", [ArgosColor(256, 0, 0), ArgosColor(0, -1, 0)])
def test_gamma_correct_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        gamma_correct(bad)


def test_scale_identity_and_zero():
    pink = ArgosColor(255, 105, 180)
    assert pink * 1.0 == ArgosColor(255, 105, 180)
    assert pink * 0.0 == ArgosColor(0, 0, 0)


def test_scale_truncates():
    assert ArgosColor(255, 105, 180) * 0.5 == ArgosColor(127, 52, 90)


def test_color_is_immutable():
    color = ArgosColor(1, 2, 3)
    with pytest.raises(AttributeError):
        color.r = 5
    assert color.r == 1