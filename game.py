from __future__ import annotations

# Facade module that re-exports the Tic-Tac-Toe core API.
# Used by the Flask app and tests; single-responsibility modules live under tictactoe_core/*.

from typing import Iterable

from tictactoe_core.board import Board, Coord
from tictactoe_core.errors import (
    BoardError,
    DimensionMismatch,
    IndexOutOfBounds,
    InvalidDimension,
)
from tictactoe_core.lines import (
    Line,
    all_lines,
    column_lines,
    diagonal_lines,
    draw_check,
    first_winning_line,
    row_lines,
    uniform_mark,
)
from tictactoe_core.tiles import Outcome, Player, Tile
from tictactoe_core.cli import (
    IllegalMove,
    checked_move,
    parse_cell,
    parse_moves,
    play,
    replay,
)


def new_empty(side_length: int) -> Board:
    return Board.new_empty(side_length)


def from_cells(side_length: int, cells: Iterable[Tile]) -> Board:
    return Board.from_cells(side_length, cells)


def standard() -> Board:
    return Board.standard()


def next_player(board: Board) -> Player:
    """Infers whose turn it is from mark counts, X moving first."""
    x_cnt = sum(1 for t in board.cells if t is Tile.X)
    o_cnt = sum(1 for t in board.cells if t is Tile.O)
    return Player.X if x_cnt <= o_cnt else Player.O


def main() -> int:
    # CLI driver delegated to tictactoe_core.cli
    from tictactoe_core.cli import main as _main
    return _main()


if __name__ == '__main__':
    raise SystemExit(main())
