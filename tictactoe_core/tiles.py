from __future__ import annotations

from enum import Enum
from typing import Optional


class Player(Enum):
    """One of the two players."""
    X = 'X'
    O = 'O'

    def other(self) -> 'Player':
        return Player.O if self is Player.X else Player.X


class Tile(Enum):
    """The content of one board cell: empty or marked by a player."""
    EMPTY = '.'
    X = 'X'
    O = 'O'

    @classmethod
    def mark(cls, player: Player) -> 'Tile':
        return cls.X if player is Player.X else cls.O

    @classmethod
    def parse(cls, text: str) -> 'Tile':
        """Reads a tile from its glyph. Raises ValueError on unknown glyphs."""
        t = str(text).strip().upper()
        if t in ('', '.', '-', '_'):
            return cls.EMPTY
        if t == 'X':
            return cls.X
        if t == 'O':
            return cls.O
        raise ValueError(f'unknown tile glyph: {text!r}')

    @property
    def player(self) -> Optional[Player]:
        if self is Tile.EMPTY:
            return None
        return Player(self.value)

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def outcome(self) -> 'Outcome':
        """Maps the tile to the outcome a line made only of this tile would have."""
        if self is Tile.EMPTY:
            return Outcome.NONE
        return Outcome.win(Player(self.value))

    def __str__(self) -> str:
        return self.glyph


class Outcome(Enum):
    """Result of evaluating a board.

    NONE means the game is undecided: no line is complete and empty cells remain.
    """
    NONE = 'none'
    X_WINS = 'x'
    O_WINS = 'o'
    DRAW = 'draw'

    @classmethod
    def win(cls, player: Player) -> 'Outcome':
        return cls.X_WINS if player is Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self is Outcome.X_WINS:
            return Player.X
        if self is Outcome.O_WINS:
            return Player.O
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.NONE

    def __str__(self) -> str:
        if self.winner is not None:
            return f'{self.winner.value} wins'
        if self is Outcome.DRAW:
            return 'draw'
        return 'undecided'
