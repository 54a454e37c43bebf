"""Fractal view state and how it reacts to keys, mouse buttons and motion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .textutil import prefix_compare

WIDTH = 800
HEIGHT = 800
DEFAULT_JULIA = (-0.7, 0.27015)

_BUTTON_LEFT = 1
_WHEEL_UP = 4
_WHEEL_DOWN = 5
_PAN_STEP = 0.1
_ZOOM_FACTOR = 1.1
_ZOOM_PULL = 0.05
_COLOR_STEP = 64


class FractalKind(Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


class Key(IntEnum):
    """Keysyms the view responds to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    J = 0x6A
    C = 0x63
    MINUS = 0x2D
    PLUS = 0x2B
    EQUAL = 0x3D


def kind_from_name(name: str | None) -> FractalKind:
    """Julia when ``name`` starts with ``julia``, Mandelbrot otherwise."""
    if prefix_compare(name, "julia", 5) == 0:
        return FractalKind.JULIA
    return FractalKind.MANDELBROT


@dataclass
class Fractal:
    """Everything that decides what the view shows.

    A Julia set whose constant is left at (0, 0) gets a default constant.
    """

    name: str
    julia_x: float = 0.0
    julia_y: float = 0.0
    color_shift: int = 100
    width: int = WIDTH
    height: int = HEIGHT
    escape_value: float = field(default=4.0, init=False)
    iterations: int = field(default=42, init=False)
    shift_x: float = field(default=0.0, init=False)
    shift_y: float = field(default=0.0, init=False)
    zoom: float = field(default=1.0, init=False)
    allow_julia_change: bool = field(default=False, init=False)
    closed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid view size {self.width}x{self.height}")
        if self.kind is FractalKind.JULIA and self.julia_x == 0.0 and self.julia_y == 0.0:
            self.julia_x, self.julia_y = DEFAULT_JULIA

    @property
    def kind(self) -> FractalKind:
        return kind_from_name(self.name)

    def _to_plane(self, x: int, y: int) -> tuple[float, float]:
        return (x / self.width) * 4 - 2, (y / self.height) * 4 - 2

    def key_press(self, keysym: int) -> bool:
        """Apply a key press; return whether the view must be redrawn.

        Escape marks the view as closed and needs no redraw.
        """
        step = _PAN_STEP * self.zoom
        if keysym == Key.ESCAPE:
            self.closed = True
            return False
        if keysym == Key.LEFT:
            self.shift_x += step
        elif keysym == Key.RIGHT:
            self.shift_x -= step
        elif keysym == Key.UP:
            self.shift_y += step
        elif keysym == Key.DOWN:
            self.shift_y -= step
        elif keysym == Key.J:
            self.allow_julia_change = not self.allow_julia_change
        elif keysym in (Key.C, Key.PLUS, Key.EQUAL):
            self.color_shift = (self.color_shift + _COLOR_STEP) % 256
        elif keysym == Key.MINUS:
            self.color_shift = (self.color_shift - _COLOR_STEP + 256) % 256
        return True

    def mouse_press(self, button: int, x: int, y: int) -> bool:
        """Apply a mouse button press at (x, y); return whether anything changed.

        The left button picks the Julia constant; the wheel zooms toward or
        away from the pointer.
        """
        mouse_x, mouse_y = self._to_plane(x, y)
        changed = False
        if self.kind is FractalKind.JULIA and button == _BUTTON_LEFT:
            self.julia_x, self.julia_y = mouse_x, mouse_y
            changed = True
        if button == _WHEEL_UP:
            self.shift_x -= (mouse_x - self.shift_x) * _ZOOM_PULL
            self.shift_y -= (mouse_y - self.shift_y) * _ZOOM_PULL
            self.zoom *= _ZOOM_FACTOR
            changed = True
        elif button == _WHEEL_DOWN:
            self.shift_x += (mouse_x - self.shift_x) * _ZOOM_PULL
            self.shift_y += (mouse_y - self.shift_y) * _ZOOM_PULL
            self.zoom /= _ZOOM_FACTOR
            changed = True
        return changed

    def track_motion(self, x: int, y: int) -> bool:
        """Follow the pointer with the Julia constant when that is switched on."""
        if not self.allow_julia_change:
            return False
        new_x, new_y = self._to_plane(x, y)
        if new_x == self.julia_x and new_y == self.julia_y:
            return False
        self.julia_x, self.julia_y = new_x, new_y
        return True