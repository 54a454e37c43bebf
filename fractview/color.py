"""Colour constants and the escape-time palette."""

from __future__ import annotations

from enum import IntEnum


class Palette(IntEnum):
    """Named 0xRRGGBB colours."""

    BLACK = 0x000000
    WHITE = 0xFFFFFF
    RED = 0xFF0000
    GREEN = 0x00FF00
    BLUE = 0x0000FF
    MAGENTA_BURST = 0xFF00FF
    LIME_SHOCK = 0xCCFF00
    NEON_ORANGE = 0xFF6600
    PSYCHEDELIC_PURPLE = 0x660066
    AQUA_DREAM = 0x33CCCC
    HOT_PINK = 0xFF66B2
    ELECTRIC_BLUE = 0x0066FF
    LAVA_RED = 0xFF3300


def get_color(iteration: int, max_iterations: int, color_shift: int) -> int:
    """Colour for a point that escaped after ``iteration`` steps.

    Points that never escaped are black.  Otherwise a smooth polynomial
    palette is evaluated at ``iteration / max_iterations`` and every channel
    is rotated by ``color_shift`` modulo 256.
    """
    if iteration >= max_iterations:
        return Palette.BLACK.value
    t = iteration / max_iterations
    u = 1 - t
    red = int(9 * u * t * t * t * 255)
    green = int(15 * u * u * t * t * 255)
    blue = int(8.5 * u * u * u * t * 255)
    red, green, blue = ((channel + color_shift) % 256 for channel in (red, green, blue))
    return (red << 16) | (green << 8) | blue