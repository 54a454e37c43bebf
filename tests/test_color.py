import pytest

from fractview.color import Palette, get_color


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


@pytest.mark.parametrize("iteration", [42, 43, 100])
def test_points_that_never_escape_are_black(iteration):
    assert get_color(iteration, 42, 100) == Palette.BLACK


@pytest.mark.parametrize("shift", [0, 64, 100, 192])
def test_first_iteration_shows_only_the_shift(shift):
    assert _channels(get_color(0, 42, shift)) == (shift, shift, shift)


@pytest.mark.parametrize("iteration", range(0, 42, 5))
def test_colors_stay_within_rgb(iteration):
    color = get_color(iteration, 42, 100)
    assert 0 <= color <= Palette.WHITE


@pytest.mark.parametrize("iteration", range(0, 42, 3))
def test_shift_is_cyclic(iteration):
    assert get_color(iteration, 42, 256) == get_color(iteration, 42, 0)
    assert get_color(iteration, 42, 100 + 256) == get_color(iteration, 42, 100)


def test_shift_rotates_each_channel():
    base = _channels(get_color(20, 42, 0))
    shifted = _channels(get_color(20, 42, 64))
    assert all((b + 64) % 256 == s for b, s in zip(base, shifted))