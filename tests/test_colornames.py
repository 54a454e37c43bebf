import pytest

from fractview.colornames import lookup_color, text_to_rgb


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, value):
    assert lookup_color(name) == value


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Alice Blue") == lookup_color("alice blue")


def test_duplicate_names_use_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_minus_one():
    assert lookup_color("none") == -1
    assert text_to_rgb("None", None) == -1


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_text_hex():
    assert text_to_rgb("#ff00ff", None) == 0xFF00FF
    assert text_to_rgb("#FF00FF", "ignored") == 0xFF00FF


def test_text_hex_stops_at_non_hex_and_empty_is_zero():
    assert text_to_rgb("#12zz", None) == 0x12
    assert text_to_rgb("#", None) == 0
    assert text_to_rgb("#xyz", None) == 0


def test_text_joins_suffix():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("Sea", "Green") == lookup_color("sea green")


def test_text_plain_name():
    assert text_to_rgb("khaki", None) == lookup_color("khaki")


def test_text_unknown_is_zero():
    assert text_to_rgb("nonexistent", None) == 0
    assert text_to_rgb("light", "nothing") == 0


def test_text_long_join_is_truncated_and_unknown():
    assert text_to_rgb("a" * 70, "b") == 0