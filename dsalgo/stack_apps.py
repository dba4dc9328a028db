"""Applications of stacks: maze search, postfix evaluation and conversion, bracket checking."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Optional

_WALL = "1"
_VISITED = "."
_EXIT = "x"
_ENTRY = "e"
_DIGITS = "0123456789"


@dataclass(frozen=True)
class MazeResult:
    """Outcome of a maze search."""

    solved: bool
    visited: tuple[tuple[int, int], ...]
    grid: tuple[str, ...]


def solve_maze(
    maze: Sequence[Sequence[str]], entry: Optional[tuple[int, int]] = None
) -> MazeResult:
    """Search a maze depth first with an explicit stack.

    Walls are ``'1'``, the exit is ``'x'``; visited cells are marked ``'.'``.
    Without an ``entry`` the search starts from the cell marked ``'e'``.
    """
    grid = [list(row) for row in maze]

    def inside(r: int, c: int) -> bool:
        return 0 <= r < len(grid) and 0 <= c < len(grid[r])

    if entry is None:
        entry = next(
            ((r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == _ENTRY),
            None,
        )
        if entry is None:
            raise ValueError("the maze has no entry cell")
    if not inside(*entry):
        raise ValueError(f"entry {entry} is outside the maze")

    def snapshot() -> tuple[str, ...]:
        return tuple("".join(row) for row in grid)

    pending: list[tuple[int, int]] = []
    visited: list[tuple[int, int]] = []
    here = entry
    while grid[here[0]][here[1]] != _EXIT:
        r, c = here
        grid[r][c] = _VISITED
        visited.append(here)
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if inside(nr, nc) and grid[nr][nc] not in (_WALL, _VISITED):
                pending.append((nr, nc))
        if not pending:
            return MazeResult(False, tuple(visited), snapshot())
        here = pending.pop()
    return MazeResult(True, tuple(visited), snapshot())


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in postfix expression")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_postfix(expr: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    stack: list[int] = []
    for ch in expr:
        if ch.isspace():
            continue
        if ch in _OPERATIONS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATIONS[ch](left, right))
        elif ch in _DIGITS:
            stack.append(int(ch))
        else:
            raise ValueError(f"unexpected character {ch!r}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def priority(op: str) -> int:
    """Return the precedence of an operator; ``'('`` ranks lowest."""
    if op == "(":
        return 0
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    raise ValueError(f"{op!r} is not an operator")


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression to postfix notation."""
    output: list[str] = []
    operators: list[str] = []
    for ch in expr:
        if ch == "(":
            operators.append(ch)
        elif ch == ")":
            while True:
                if not operators:
                    raise ValueError("unbalanced ')' in expression")
                top = operators.pop()
                if top == "(":
                    break
                output.append(top)
        elif ch in _OPERATIONS:
            while operators and priority(ch) <= priority(operators[-1]):
                output.append(operators.pop())
            operators.append(ch)
        else:
            output.append(ch)
    while operators:
        top = operators.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return "".join(output)


_CLOSING = {")": "(", "]": "[", "}": "{"}


def check_brackets(text: str) -> bool:
    """Return whether every bracket in ``text`` is properly matched and nested."""
    opened: list[str] = []
    for ch in text:
        if ch in "([{":
            opened.append(ch)
        elif ch in _CLOSING:
            if not opened or opened.pop() != _CLOSING[ch]:
                return False
    return not opened