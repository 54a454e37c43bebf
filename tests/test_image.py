import pytest

from fractview.image import Image, PixelFormat, convert_color

RGB565 = PixelFormat(depth=16, red_shift=11, red_bits=5, green_shift=5, green_bits=6, blue_shift=0, blue_bits=5)


def test_put_get_round_trip():
    image = Image(42, 42)
    image.put_pixel(3, 7, 0x00FF99FF)
    assert image.get_pixel(3, 7) == 0x00FF99FF
    assert image.get_pixel(7, 3) == 0


def test_new_image_is_black_and_sized():
    image = Image(10, 4)
    assert image.size_line == image.width * image.bytes_per_pixel
    assert len(image.data) == image.size_line * image.height
    assert not any(image.data)


def test_little_endian_layout():
    image = Image(2, 2, endian=0)
    image.put_pixel(0, 0, 0x00112233)
    assert bytes(image.data[0:4]) == bytes([0x33, 0x22, 0x11, 0x00])


def test_big_endian_layout():
    image = Image(2, 2, endian=1)
    image.put_pixel(1, 1, 0x00112233)
    offset = image.size_line + image.bytes_per_pixel
    assert bytes(image.data[offset : offset + 4]) == bytes([0x00, 0x11, 0x22, 0x33])


def test_out_of_bounds_put_is_ignored():
    image = Image(5, 5)
    before = bytes(image.data)
    for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5)]:
        image.put_pixel(x, y, 0xFFFFFF)
    assert bytes(image.data) == before


def test_out_of_bounds_get_raises():
    image = Image(5, 5)
    with pytest.raises(IndexError):
        image.get_pixel(5, 0)


def test_color_is_stored_as_unsigned_32_bits():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_fill_sets_every_pixel():
    image = Image(6, 3)
    image.fill(0x33CCCC)
    assert {image.get_pixel(x, y) for x in range(6) for y in range(3)} == {0x33CCCC}


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_rejected(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_invalid_endian_rejected():
    with pytest.raises(ValueError):
        Image(2, 2, endian=2)


@pytest.mark.parametrize("color", [0, 0xFF0000, 0x123456, 0xFFFFFF])
def test_deep_visual_keeps_color(color):
    assert convert_color(color, PixelFormat()) == color


def test_shallow_visual_packs_channels():
    assert convert_color(0xFFFFFF, RGB565) == 0xFFFF
    assert convert_color(0x000000, RGB565) == 0


def test_shallow_visual_channels_are_separate():
    red = convert_color(0xFF0000, RGB565)
    green = convert_color(0x00FF00, RGB565)
    blue = convert_color(0x0000FF, RGB565)
    assert red & green == 0 and green & blue == 0 and red & blue == 0
    assert red | green | blue == convert_color(0xFFFFFF, RGB565)