import pytest

from fractview.complexmath import Range, map_range, square_complex, sum_complex

PLANE = Range(-2.0, 2.0)
SCREEN = Range(0, 800)


def test_map_range_endpoints():
    assert map_range(0, PLANE, SCREEN) == -2.0
    assert map_range(800, PLANE, SCREEN) == 2.0


@pytest.mark.parametrize("n", [0, 1, 57, 399, 400, 799, 800])
def test_map_range_round_trip(n):
    there = map_range(n, PLANE, SCREEN)
    assert map_range(there, SCREEN, PLANE) == pytest.approx(n)


def test_map_range_is_monotonic():
    values = [map_range(n, PLANE, SCREEN) for n in range(0, 801, 50)]
    assert values == sorted(values)


def test_map_range_empty_old_range():
    with pytest.raises(ValueError):
        map_range(1.0, PLANE, Range(3.0, 3.0))


@pytest.mark.parametrize("z", [0j, 1 + 2j, -0.7 + 0.27015j, 3 - 4j])
def test_sum_complex_identity_and_commutativity(z):
    other = 0.5 - 1.5j
    assert sum_complex(z, 0j) == z
    assert sum_complex(z, other) == sum_complex(other, z)


def test_square_of_imaginary_unit():
    assert square_complex(1j) == -1 + 0j


@pytest.mark.parametrize("z", [1 + 2j, -0.7 + 0.27015j, 3 - 4j, 0.25 + 0j])
def test_square_symmetries(z):
    assert square_complex(-z) == square_complex(z)
    assert square_complex(z.conjugate()) == square_complex(z).conjugate()


def test_square_magnitude():
    z = 3 - 4j
    assert abs(square_complex(z)) == pytest.approx(abs(z) ** 2)