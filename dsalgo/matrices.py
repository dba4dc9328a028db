"""Dense and sparse matrix transposition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a dense matrix given as rows."""
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a dense matrix with each value right-aligned in two columns."""
    return "".join("".join(f"{value:2d} " for value in row) + "\n" for row in matrix)


@dataclass(frozen=True)
class Term:
    """One non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: int


@dataclass(frozen=True)
class SparseMatrix:
    """A matrix stored as a list of its non-zero terms."""

    rows: int
    cols: int
    terms: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        terms: Iterable = self.terms
        normalised = tuple(t if isinstance(t, Term) else Term(*t) for t in terms)
        for term in normalised:
            if not (0 <= term.row < self.rows and 0 <= term.col < self.cols):
                raise ValueError(f"term {term} lies outside a {self.rows}x{self.cols} matrix")
        object.__setattr__(self, "terms", normalised)

    def transpose(self) -> SparseMatrix:
        """Return the transpose, with terms ordered by their new row."""
        terms = tuple(
            Term(term.col, term.row, term.value)
            for col in range(self.cols)
            for term in self.terms
            if term.col == col
        )
        return SparseMatrix(self.cols, self.rows, terms)

    def to_dense(self) -> list[list[int]]:
        """Return the matrix as a list of rows."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for term in self.terms:
            dense[term.row][term.col] = term.value
        return dense

    def format(self) -> str:
        """Render each term as ``(row, col, value)`` on its own line."""
        return "\n".join(f"({t.row}, {t.col}, {t.value})" for t in self.terms)