"""In-memory 32-bit pixel images and colour conversion for shallow visuals."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PixelFormat:
    """Depth of a visual and where each colour channel lives in a pixel."""

    depth: int = 24
    red_shift: int = 16
    red_bits: int = 8
    green_shift: int = 8
    green_bits: int = 8
    blue_shift: int = 0
    blue_bits: int = 8


def convert_color(color: int, pixel_format: PixelFormat) -> int:
    """Turn a 0xRRGGBB colour into a pixel value for ``pixel_format``.

    Visuals of depth 24 or more take the colour as it is; shallower ones
    get each channel scaled down and moved to its place.
    """
    if pixel_format.depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    fmt = pixel_format
    return (
        ((red >> (16 - fmt.red_bits)) << fmt.red_shift)
        + ((green >> (16 - fmt.green_bits)) << fmt.green_shift)
        + ((blue >> (16 - fmt.blue_bits)) << fmt.blue_shift)
    )


@dataclass
class Image:
    """A width x height image of 32-bit pixels stored row by row.

    ``endian`` is 0 for little-endian pixels and 1 for big-endian ones.
    """

    width: int
    height: int
    endian: int = 0
    pixel_format: PixelFormat = field(default_factory=PixelFormat)
    bpp: int = field(default=32, init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, not {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row."""
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * self.bytes_per_pixel

    def _encode(self, color: int) -> bytes:
        return (color & 0xFFFFFFFF).to_bytes(self.bytes_per_pixel, self._byteorder)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); points outside the image are ignored."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        offset = self._offset(x, y)
        self.data[offset : offset + self.bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + self.bytes_per_pixel], self._byteorder)

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.data[:] = self._encode(color) * (self.width * self.height)