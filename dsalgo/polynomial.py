"""Dense polynomials stored from the highest degree down."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Polynomial:
    """A polynomial whose coefficients run from the highest power to the constant."""

    coefficients: tuple[float, ...]

    def __init__(self, coefficients: Iterable[float]) -> None:
        values = tuple(float(c) for c in coefficients)
        if not values:
            raise ValueError("a polynomial needs at least one coefficient")
        object.__setattr__(self, "coefficients", values)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        width = max(len(self.coefficients), len(other.coefficients))
        left = (0.0,) * (width - len(self.coefficients)) + self.coefficients
        right = (0.0,) * (width - len(other.coefficients)) + other.coefficients
        return Polynomial(a + b for a, b in zip(left, right))

    def __str__(self) -> str:
        terms = [
            f"{c:.1f}x^{power}"
            for c, power in zip(self.coefficients, range(self.degree, 0, -1))
        ]
        terms.append(f"{self.coefficients[-1]:.1f}")
        return " + ".join(terms)

    def trimmed(self) -> Polynomial:
        """Return the polynomial without leading zero coefficients."""
        first = next(
            (i for i, c in enumerate(self.coefficients) if c != 0),
            len(self.coefficients) - 1,
        )
        return Polynomial(self.coefficients[first:])