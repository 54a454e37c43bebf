import pytest

from fractview.textutil import is_numeric_arg, parse_double, prefix_compare, write_error


@pytest.mark.parametrize(
    "text, expected",
    [("0.285", 0.285), ("-0.7", -0.7), ("12", 12.0), ("", 0.0), ("\t 3", 3.0)],
)
def test_parse_double_plain_values(text, expected):
    assert parse_double(text) == pytest.approx(expected)


def test_parse_double_sign_runs():
    assert parse_double("+-1.5") == pytest.approx(-1.5)
    assert parse_double("--2") == pytest.approx(2.0)


@pytest.mark.parametrize("value", [0.0, 0.125, -0.7, 0.27015, -1.0, 3.5])
def test_parse_double_round_trip(value):
    assert parse_double(f"{value:.5f}") == pytest.approx(value)


@pytest.mark.parametrize("arg", ["-0.5", "0.3", "1", "-", "10."])
def test_numeric_args_accepted(arg):
    assert is_numeric_arg(arg) is True


@pytest.mark.parametrize("arg", ["", "abc", "1.2.3", ".5", "+1", "5-", "0,3"])
def test_numeric_args_rejected(arg):
    assert is_numeric_arg(arg) is False


def test_prefix_compare_equal_prefixes():
    assert prefix_compare("julia", "julia", 5) == 0
    assert prefix_compare("juliaset", "julia", 5) == 0
    assert prefix_compare("mandelbrot", "mandelbrot", 10) == 0


def test_prefix_compare_ordering():
    assert prefix_compare("abc", "abd", 3) < 0
    assert prefix_compare("abd", "abc", 3) > 0
    assert prefix_compare("ab", "abc", 3) < 0
    assert prefix_compare("julia", "jul", 5) > 0


def test_prefix_compare_degenerate_inputs():
    assert prefix_compare(None, "abc", 3) == 0
    assert prefix_compare("abc", "xyz", 0) == 0
    assert prefix_compare("abc", "xyz", -4) == 0


def test_write_error_goes_to_stderr(capsys):
    write_error("oops\n")
    write_error(None)
    captured = capsys.readouterr()
    assert captured.err == "oops\n"
    assert captured.out == ""