"""A drawable window surface: pixels, text, images and the pointer."""

from __future__ import annotations

from typing import NamedTuple

from .image import Image, PixelFormat, convert_color


class _TextRun(NamedTuple):
    x: int
    y: int
    color: int
    text: str
    font: str | None


class Surface:
    """The drawable contents of a window of a given size.

    Pixels are kept in an image whose background is black; strings drawn on
    the surface are kept in :attr:`texts` in the order they were drawn.
    """

    def __init__(self, width: int, height: int, pixel_format: PixelFormat | None = None):
        self.pixel_format = pixel_format if pixel_format is not None else PixelFormat()
        self._canvas = Image(width, height)
        self.texts: list[_TextRun] = []
        self.font: str | None = None
        self.pointer: tuple[int, int] = (0, 0)
        self.pointer_visible = True

    @property
    def width(self) -> int:
        return self._canvas.width

    @property
    def height(self) -> int:
        return self._canvas.height

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one 0xRRGGBB point; points off the surface are dropped."""
        self._canvas.put_pixel(x, y, convert_color(color, self.pixel_format))

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value at (x, y)."""
        return self._canvas.get_pixel(x, y)

    def string_put(self, x: int, y: int, color: int, text: str) -> None:
        """Draw ``text`` with its baseline starting at (x, y) in the current font."""
        self.texts.append(
            _TextRun(x, y, convert_color(color, self.pixel_format), text, self.font)
        )

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy ``image`` with its top-left corner at (x, y), clipped to the surface."""
        rows = range(max(0, -y), min(image.height, self.height - y))
        cols = range(max(0, -x), min(image.width, self.width - x))
        for row in rows:
            for col in cols:
                self._canvas.put_pixel(x + col, y + row, image.get_pixel(col, row))

    def clear(self) -> None:
        """Reset the surface to its black background."""
        self._canvas.fill(0)
        self.texts.clear()

    def set_font(self, name: str) -> None:
        """Choose the font used by later :meth:`string_put` calls."""
        if not name:
            raise ValueError("font name must not be empty")
        self.font = name

    def move_pointer(self, x: int, y: int) -> None:
        """Warp the pointer to (x, y) relative to the surface."""
        self.pointer = (x, y)

    def pointer_position(self) -> tuple[int, int]:
        """Return the pointer position relative to the surface."""
        return self.pointer

    def hide_pointer(self) -> None:
        self.pointer_visible = False

    def show_pointer(self) -> None:
        self.pointer_visible = True