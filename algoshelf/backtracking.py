"""Backtracking and recursive puzzles: N queens and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["solve_n_queens", "hanoi_moves"]


def solve_n_queens(n: int) -> list[int] | None:
    """Place ``n`` non-attacking queens column by column, trying rows in order.

    Returns the first placement found as a list whose item at each column is
    the queen's row, or None if no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows: list[int] = []
    used_rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(col: int) -> bool:
        if col == n:
            return True
        for row in range(n):
            if row in used_rows or row - col in falling or row + col in rising:
                continue
            rows.append(row)
            used_rows.add(row)
            falling.add(row - col)
            rising.add(row + col)
            if place(col + 1):
                return True
            rows.pop()
            used_rows.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    return rows if place(0) else None


def hanoi_moves(count: int, source: int = 1, spare: int = 2, target: int = 3) -> Iterator[tuple[int, int]]:
    """Yield the (from, to) moves that carry ``count`` rings from ``source`` to ``target``."""
    if count <= 0:
        return
    yield from hanoi_moves(count - 1, source, target, spare)
    yield source, target
    yield from hanoi_moves(count - 1, spare, source, target)