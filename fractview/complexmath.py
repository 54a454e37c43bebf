"""Linear range mapping and the complex arithmetic of the escape-time iteration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """A closed interval given by its two ends."""

    low: float
    high: float

    @property
    def span(self) -> float:
        return self.high - self.low


def map_range(n: float, new_range: Range, old_range: Range) -> float:
    """Map ``n`` linearly from ``old_range`` onto ``new_range``."""
    if old_range.span == 0:
        raise ValueError("cannot map from an empty range")
    scale = new_range.span / old_range.span
    return scale * (n - old_range.low) + new_range.low


def sum_complex(z1: complex, z2: complex) -> complex:
    """Return the sum of two complex numbers."""
    return complex(z1.real + z2.real, z1.imag + z2.imag)


def square_complex(z: complex) -> complex:
    """Return the square of a complex number."""
    return complex(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)