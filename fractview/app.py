"""Command line entry point and the interactive fractal viewer."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .display import Display, EventMask, EventType
from .image import Image
from .render import render
from .textutil import is_numeric_arg, parse_double, prefix_compare, write_error
from .view import DEFAULT_JULIA, Fractal

USAGE = (
    'Please enter \n\t"fractview mandelbrot" or \n\t'
    'fractview julia <value_1> <value_2>"\n'
)
RANGE_MESSAGE = "Wrong input: put number between 1 and -1\n"


class UsageError(ValueError):
    """The command line names no known fractal."""


class JuliaRangeError(ValueError):
    """A Julia constant lies outside [-1, 1]."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build the fractal named by the arguments (program name excluded)."""
    args = list(argv)
    if len(args) == 1 and prefix_compare(args[0], "mandelbrot", 10) == 0:
        return Fractal(args[0])
    if len(args) == 3 and prefix_compare(args[0], "julia", 5) == 0:
        name, real_text, imag_text = args
        if not (is_numeric_arg(real_text) and is_numeric_arg(imag_text)):
            return Fractal(name, *DEFAULT_JULIA)
        julia_x, julia_y = parse_double(real_text), parse_double(imag_text)
        if not (-1 <= julia_x <= 1 and -1 <= julia_y <= 1):
            raise JuliaRangeError(RANGE_MESSAGE)
        return Fractal(name, julia_x, julia_y)
    raise UsageError(USAGE)


class Viewer:
    """A window showing one fractal and reacting to user input."""

    def __init__(self, fractal: Fractal, display: Display | None = None):
        self.fractal = fractal
        self.display = display if display is not None else Display()
        self.window = self.display.new_window(fractal.width, fractal.height, fractal.name)
        self.image = Image(fractal.width, fractal.height)
        self.window.hook(EventType.KEY_PRESS, EventMask.KEY_PRESS, self._on_key, None)
        self.window.mouse_hook(self._on_mouse, None)
        self.window.hook(
            EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY, self._on_destroy, None
        )
        self.window.hook(
            EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION, self._on_motion, None
        )

    @property
    def closed(self) -> bool:
        return self.display.closed

    def draw(self) -> None:
        """Render the fractal and show it in the window."""
        render(self.fractal, self.image)
        surface = self.window.surface
        surface.clear()
        surface.put_image(self.image, 0, 0)

    def close(self) -> None:
        """Close the window and the display."""
        self.fractal.closed = True
        if self.display.closed:
            return
        if any(window is self.window for window in self.display.windows):
            self.display.destroy_window(self.window)
        self.display.end_loop()
        self.display.close()

    def run(self) -> None:
        """Draw the fractal, then handle events until the viewer closes."""
        self.draw()
        if not self.closed:
            self.display.loop()

    def _on_key(self, keysym: int, _param: object) -> None:
        self.fractal.key_press(keysym)
        if self.fractal.closed:
            self.close()
        else:
            self.draw()

    def _on_mouse(self, button: int, x: int, y: int, _param: object) -> None:
        if self.fractal.mouse_press(button, x, y):
            self.draw()

    def _on_motion(self, x: int, y: int, _param: object) -> None:
        if self.fractal.track_motion(x, y):
            self.draw()

    def _on_destroy(self, _param: object) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer from the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        fractal = parse_args(args)
    except UsageError as exc:
        write_error(str(exc))
        return 1
    except JuliaRangeError as exc:
        write_error(str(exc))
        return 0
    try:
        viewer = Viewer(fractal)
    except (RuntimeError, ValueError) as exc:
        write_error(f"fractview: {exc}\n")
        return 1
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())