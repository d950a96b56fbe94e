from __future__ import annotations

from typing import Optional


class BoardError(ValueError):
    """Base class for rejected board construction or placement input."""


class InvalidDimension(BoardError):
    def __init__(self, side_length: object) -> None:
        self.side_length = side_length
        super().__init__(f'side length must be a positive integer, got {side_length!r}')


class DimensionMismatch(BoardError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'expected {expected} cells, got {actual}')


class IndexOutOfBounds(BoardError):
    """A cell index, or a (row, col) pair, outside the board.

    For coordinate lookups `index` is None and `row`/`col` hold the rejected pair.
    """
    def __init__(self, index: Optional[int], size: int,
                 row: Optional[int] = None, col: Optional[int] = None) -> None:
        self.index = index
        self.size = size
        self.row = row
        self.col = col
        if index is None:
            super().__init__(f'cell ({row}, {col}) outside board of {size} cells')
        else:
            super().__init__(f'index {index} outside board of {size} cells')
