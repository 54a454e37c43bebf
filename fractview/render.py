"""Escape-time rendering of the Mandelbrot and Julia sets."""

from __future__ import annotations

from .color import get_color
from .complexmath import Range, map_range, square_complex, sum_complex
from .image import Image
from .view import Fractal, FractalKind

_PLANE = Range(-2.0, 2.0)


def plane_point(fractal: Fractal, x: int, y: int) -> complex:
    """The point of the complex plane shown at pixel (x, y)."""
    real = map_range(x, _PLANE, Range(0, fractal.width)) * fractal.zoom + fractal.shift_x
    imag = map_range(y, _PLANE, Range(0, fractal.height)) * fractal.zoom + fractal.shift_y
    return complex(real, imag)


def escape_count(fractal: Fractal, x: int, y: int) -> int:
    """Step at which the orbit of pixel (x, y) escapes, or the step limit."""
    point = plane_point(fractal, x, y)
    if fractal.kind is FractalKind.JULIA:
        z, c = point, complex(fractal.julia_x, fractal.julia_y)
    else:
        z, c = 0j, point
    for step in range(fractal.iterations):
        z = sum_complex(square_complex(z), c)
        if z.real * z.real + z.imag * z.imag > fractal.escape_value:
            return step
    return fractal.iterations


def pixel_color(fractal: Fractal, x: int, y: int) -> int:
    """Colour of pixel (x, y); points that never escape are black."""
    return get_color(escape_count(fractal, x, y), fractal.iterations, fractal.color_shift)


def render(fractal: Fractal, image: Image) -> Image:
    """Draw the fractal into ``image`` and return it."""
    for y in range(min(fractal.height, image.height)):
        for x in range(min(fractal.width, image.width)):
            image.put_pixel(x, y, pixel_color(fractal, x, y))
    return image