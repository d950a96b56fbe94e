from __future__ import annotations

from typing import Iterable, List, Sequence, Set, Tuple

from .tiles import Outcome, Tile

Line = Tuple[int, ...]  # cell indices, in board order


def uniform_mark(tiles: Iterable[Tile]) -> Outcome:
    """
    Reduces a line of tiles to a single outcome.
    Each tile maps to its outcome value; a line whose tiles collapse to exactly one
    distinct value has that value, any mix of values yields Outcome.NONE.
    """
    seen: Set[Outcome] = {t.outcome for t in tiles}
    if len(seen) == 1:
        return next(iter(seen))
    return Outcome.NONE


def row_lines(side: int) -> List[Line]:
    """Contiguous chunks of `side` indices, one per row."""
    return [tuple(range(r * side, r * side + side)) for r in range(side)]


def column_lines(side: int) -> List[Line]:
    """Strided sequences starting at each column, stepping by `side`."""
    return [tuple(range(c, side * side, side)) for c in range(side)]


def diagonal_lines(side: int) -> List[Line]:
    """Main diagonal (stride side+1 from 0) then anti-diagonal (stride side-1 from side-1)."""
    main = tuple(k * (side + 1) for k in range(side))
    anti = tuple((side - 1) + k * (side - 1) for k in range(side))
    return [main, anti]


def all_lines(side: int) -> List[Line]:
    """Every line in evaluation priority order: rows, columns, diagonals."""
    return row_lines(side) + column_lines(side) + diagonal_lines(side)


def first_winning_line(cells: Sequence[Tile], lines: Iterable[Line]) -> Tuple[Outcome, Line]:
    """Returns the first line whose uniform mark is a win, or (NONE, ())."""
    for line in lines:
        result = uniform_mark(cells[i] for i in line)
        if result is not Outcome.NONE:
            return result, line
    return Outcome.NONE, ()


def draw_check(cells: Iterable[Tile]) -> Outcome:
    """DRAW when every cell is marked, NONE otherwise."""
    seen = {Outcome.NONE if t is Tile.EMPTY else Outcome.DRAW for t in cells}
    return next(iter(seen)) if len(seen) == 1 else Outcome.NONE
