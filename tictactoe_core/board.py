from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .errors import DimensionMismatch, IndexOutOfBounds, InvalidDimension
from .lines import (
    Line,
    all_lines,
    column_lines,
    diagonal_lines,
    draw_check,
    first_winning_line,
    row_lines,
)
from .tiles import Outcome, Tile

Coord = Tuple[int, int]


def _check_side(side_length: object) -> int:
    if isinstance(side_length, bool) or not isinstance(side_length, int) or side_length <= 0:
        raise InvalidDimension(side_length)
    return side_length


@dataclass(frozen=True)
class Board:
    """
    An immutable square Tic-Tac-Toe board.

    Cells are stored row-major (index = row * side_length + col). Placement never
    mutates a board; it returns a new one. Turn order and occupancy are not
    enforced here, callers are expected to do that.
    """
    side_length: int
    cells: Tuple[Tile, ...]  # row-major, length == side_length ** 2

    def __post_init__(self) -> None:
        _check_side(self.side_length)
        cells = tuple(self.cells)
        for t in cells:
            if not isinstance(t, Tile):
                raise TypeError(f'board cells must be Tile values, got {t!r}')
        expected = self.side_length * self.side_length
        if len(cells) != expected:
            raise DimensionMismatch(expected, len(cells))
        # Normalize to a tuple so boards built from lists stay immutable and hashable.
        object.__setattr__(self, 'cells', cells)

    # ---------- Construction ----------

    @classmethod
    def new_empty(cls, side_length: int) -> 'Board':
        """Creates a board of empty tiles with the given side length."""
        side = _check_side(side_length)
        return cls(side, (Tile.EMPTY,) * (side * side))

    @classmethod
    def from_cells(cls, side_length: int, cells: Iterable[Tile]) -> 'Board':
        """Creates a board from a seeded row-major cell sequence."""
        return cls(side_length, tuple(cells))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[Tile, str]]]) -> 'Board':
        """Creates a board from rows of tiles or glyphs, e.g. ['X.O', '.X.', 'O.X']."""
        side = len(rows)
        flat: List[Tile] = []
        for row in rows:
            if len(row) != side:
                raise DimensionMismatch(side * side, side * len(row))
            flat.extend(t if isinstance(t, Tile) else Tile.parse(t) for t in row)
        return cls.from_cells(side, flat)

    @classmethod
    def standard(cls) -> 'Board':
        """An empty 3x3 board ready for play."""
        return cls.new_empty(3)

    # ---------- Access ----------

    @property
    def size(self) -> int:
        return len(self.cells)

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        if not (0 <= r < self.side_length and 0 <= c < self.side_length):
            raise IndexOutOfBounds(None, self.size, row=r, col=c)
        return r * self.side_length + c

    def at(self, r: int, c: int) -> Tile:
        return self.cells[self.index(r, c)]

    def coord(self, index: int) -> Coord:
        self._check_index(index)
        return divmod(index, self.side_length)

    def open_indices(self) -> List[int]:
        """Indices of empty cells, ascending."""
        return [i for i, t in enumerate(self.cells) if t is Tile.EMPTY]

    def is_full(self) -> bool:
        return Tile.EMPTY not in self.cells

    def rows(self) -> List[Tuple[Tile, ...]]:
        return [self._tiles(line) for line in row_lines(self.side_length)]

    def columns(self) -> List[Tuple[Tile, ...]]:
        return [self._tiles(line) for line in column_lines(self.side_length)]

    def diagonals(self) -> List[Tuple[Tile, ...]]:
        return [self._tiles(line) for line in diagonal_lines(self.side_length)]

    def lines(self) -> List[Line]:
        """Index tuples of every line, in evaluation order."""
        return all_lines(self.side_length)

    # ---------- Placement ----------

    def place(self, tile: Tile, index: int) -> 'Board':
        """
        Produces a new board with `tile` at `index`.
        An occupied cell is overwritten without complaint.
        """
        self._check_index(index)
        cells = list(self.cells)
        cells[index] = tile
        return Board(self.side_length, tuple(cells))

    def place_at(self, tile: Tile, r: int, c: int) -> 'Board':
        return self.place(tile, self.index(r, c))

    # ---------- Evaluation ----------

    def evaluate(self) -> Outcome:
        """Rows, then columns, then diagonals; a draw once the board is full; NONE otherwise."""
        side = self.side_length
        for lines in (row_lines(side), column_lines(side), diagonal_lines(side)):
            result, _ = first_winning_line(self.cells, lines)
            if result is not Outcome.NONE:
                return result
        return draw_check(self.cells)

    def winning_line(self) -> Optional[Line]:
        """Indices of the first completed line in evaluation order, or None."""
        result, line = first_winning_line(self.cells, self.lines())
        return line if result is not Outcome.NONE else None

    # ---------- Rendering ----------

    def pretty(self, separator: str = '-') -> str:
        """Generates a human-readable string representation of the board."""
        lines = [separator.join(t.glyph for t in row) for row in self.rows()]
        lines.append(f'side_length: {self.side_length}')
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.pretty()

    def _tiles(self, line: Line) -> Tuple[Tile, ...]:
        return tuple(self.cells[i] for i in line)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < self.size):
            raise IndexOutOfBounds(index, self.size)
