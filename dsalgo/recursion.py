"""Classic recursive algorithms: Ackermann, binomial coefficients, flood fill, Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from enum import IntEnum
from functools import lru_cache


class Color(IntEnum):
    """Pixel colours used by :func:`flood_fill`."""

    WHITE = 0
    BLACK = 1
    YELLOW = 2


def ackermann(m: int, n: int) -> int:
    """Return the Ackermann function A(m, n)."""
    if m < 0 or n < 0:
        raise ValueError("ackermann is defined for non-negative arguments only")
    if m == 0:
        return n + 1
    if n == 0:
        return ackermann(m - 1, 1)
    return ackermann(m - 1, ackermann(m, n - 1))


def binomial(n: int, k: int) -> int:
    """Return C(n, k) computed with Pascal's rule."""
    if n < 0 or not 0 <= k <= n:
        raise ValueError(f"binomial({n}, {k}) is undefined")

    @lru_cache(maxsize=None)
    def _pascal(a: int, b: int) -> int:
        if b == 0 or b == a:
            return 1
        return _pascal(a - 1, b - 1) + _pascal(a - 1, b)

    return _pascal(n, k)


def flood_fill(
    screen: MutableSequence[MutableSequence[int]],
    x: int,
    y: int,
    color: int = Color.BLACK,
) -> int:
    """Paint the white region containing ``screen[x][y]`` with ``color``.

    The screen is modified in place; the number of painted pixels is returned.
    """

    def inside(r: int, c: int) -> bool:
        return 0 <= r < len(screen) and 0 <= c < len(screen[r])

    if not inside(x, y):
        raise IndexError(f"pixel ({x}, {y}) is outside the screen")
    if color == Color.WHITE:
        raise ValueError("cannot flood fill with the colour being replaced")
    if screen[x][y] != Color.WHITE:
        return 0

    paint = int(color)
    screen[x][y] = paint
    pending = [(x, y)]
    filled = 0
    while pending:
        r, c = pending.pop()
        filled += 1
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if inside(nr, nc) and screen[nr][nc] == Color.WHITE:
                screen[nr][nc] = paint
                pending.append((nr, nc))
    return filled


def hanoi_tower(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that solve the tower of Hanoi."""
    if n < 1:
        raise ValueError("the tower needs at least one disk")

    def moves(k: int, src: str, tmp: str, dst: str) -> Iterator[tuple[int, str, str]]:
        if k == 1:
            yield (1, src, dst)
            return
        yield from moves(k - 1, src, dst, tmp)
        yield (k, src, dst)
        yield from moves(k - 1, tmp, src, dst)

    return moves(n, source, spare, target)