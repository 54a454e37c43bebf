import pytest

from fractview.color import Palette, get_color
from fractview.image import Image
from fractview.render import escape_count, pixel_color, plane_point, render
from fractview.view import Fractal


def small(name="mandelbrot", **kwargs):
    return Fractal(name, width=4, height=4, **kwargs)


def test_plane_corners_and_center():
    f = small()
    assert plane_point(f, 0, 0) == complex(-2, -2)
    assert plane_point(f, 2, 2) == complex(0, 0)
    assert plane_point(f, 4, 4) == complex(2, 2)


def test_plane_zoom_and_shift():
    f = small()
    f.zoom = 2.0
    f.shift_x = 0.5
    assert plane_point(f, 0, 2) == pytest.approx(complex(-3.5, 0))


def test_origin_never_escapes_in_mandelbrot():
    f = small()
    assert escape_count(f, 2, 2) == f.iterations
    assert pixel_color(f, 2, 2) == Palette.BLACK


def test_far_corner_escapes_at_once():
    f = small()
    assert escape_count(f, 0, 0) == 0
    assert pixel_color(f, 0, 0) == get_color(0, f.iterations, f.color_shift)


def test_julia_corner_escapes_at_once():
    f = small("julia")
    assert escape_count(f, 0, 0) == 0


def test_escape_count_bounded():
    f = small("julia")
    for y in range(4):
        for x in range(4):
            assert 0 <= escape_count(f, x, y) <= f.iterations


def test_render_matches_pixel_color():
    f = small()
    image = render(f, Image(4, 4))
    for y in range(4):
        for x in range(4):
            assert image.get_pixel(x, y) == pixel_color(f, x, y)


def test_render_clips_to_smaller_image():
    f = small()
    image = render(f, Image(2, 3))
    assert image.get_pixel(1, 2) == pixel_color(f, 1, 2)