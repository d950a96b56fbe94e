from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional, Sequence

from .board import Board
from .errors import BoardError, IndexOutOfBounds
from .tiles import Outcome, Player, Tile

logger = logging.getLogger(__name__)


class IllegalMove(Exception):
    """Raised by the driver when a move breaks turn or occupancy rules."""


def parse_moves(text: str) -> List[int]:
    """Parses a comma-separated list of cell indices, e.g. '0,4,3'."""
    out: List[int] = []
    for part in text.split(','):
        part = part.strip()
        if part == '':
            continue
        try:
            out.append(int(part))
        except ValueError:
            raise IllegalMove(f'not a cell index: {part!r}') from None
    return out


def parse_cell(board: Board, text: str) -> int:
    """Accepts a plain index ('4') or a row/column pair ('1,1' or '1 1')."""
    text = text.strip()
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t != '']
    try:
        if len(parts) == 1:
            return int(parts[0])
        if len(parts) == 2:
            return board.index(int(parts[0]), int(parts[1]))
    except ValueError:
        pass
    raise IllegalMove(f'could not parse move: {text!r}')


def checked_move(board: Board, player: Player, index: int) -> Board:
    """Applies a move for `player`, rejecting occupied cells.

    The board itself would silently overwrite; the driver is where occupancy is enforced.
    """
    if not (0 <= index < board.size):
        raise IndexOutOfBounds(index, board.size)
    if board.cells[index] is not Tile.EMPTY:
        raise IllegalMove(f'cell {index} is already taken by {board.cells[index].glyph}')
    return board.place(Tile.mark(player), index)


def replay(board: Board, moves: Sequence[int], separator: str = '-',
           out: Callable[[str], None] = print) -> Outcome:
    """Plays `moves` alternately as X then O, stopping at the first decided outcome."""
    player = Player.X
    outcome = board.evaluate()
    for n, index in enumerate(moves, start=1):
        if outcome.is_over:
            logger.info('ignoring %d trailing move(s) after %s', len(moves) - n + 1, outcome)
            break
        board = checked_move(board, player, index)
        out(f'{player.value} -> {index}')
        out(board.pretty(separator))
        outcome = board.evaluate()
        player = player.other()
    out(f'Outcome: {outcome}')
    return outcome


def play(board: Board, separator: str = '-',
         read: Callable[[str], str] = input, out: Callable[[str], None] = print) -> Outcome:
    """Interactive hot-seat game on the terminal."""
    player = Player.X
    out(board.pretty(separator))
    outcome = board.evaluate()
    while not outcome.is_over:
        text = read(f'{player.value} to move (index or r,c): ')
        try:
            board = checked_move(board, player, parse_cell(board, text))
        except (IllegalMove, BoardError) as e:
            out(f'Illegal move: {e}. Try again.')
            continue
        out(board.pretty(separator))
        outcome = board.evaluate()
        player = player.other()
    out(f'Outcome: {outcome}')
    return outcome


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Tic-Tac-Toe board driver')
    parser.add_argument('--size', type=int, default=3, help='Board side length (NxN)')
    parser.add_argument('--moves', default=None, help='Comma-separated cell indices to replay, X first')
    parser.add_argument('--separator', default='-', help='Glyph separator used when printing rows')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        board = Board.new_empty(args.size)
    except BoardError as e:
        print(f'error: {e}')
        return 2

    if args.moves is None:
        try:
            play(board, args.separator)
        except (EOFError, KeyboardInterrupt):
            print()
            return 1
        return 0

    try:
        replay(board, parse_moves(args.moves), args.separator)
    except (IllegalMove, BoardError) as e:
        print(f'error: {e}')
        return 2
    return 0
