"""
Tic-Tac-Toe core Python package.

This package contains the immutable board value and the pure-logic helpers
used to evaluate it. Turn order and tile occupancy are left to callers.
Modules:
- tiles.py: Player, Tile, Outcome
- errors.py: BoardError and its subclasses
- lines.py: line extraction and the uniform-mark rule
- board.py: Board
- cli.py: terminal driver
"""
