import unittest

from game import (
    Board,
    Outcome,
    Player,
    Tile,
    standard,
    new_empty,
    from_cells,
)


def play_indices(board, tile, indices):
    for i in indices:
        board = board.place(tile, i)
    return board


class TestTicTacToeBasics(unittest.TestCase):
    def test_standard_board_is_empty_3x3(self):
        b = standard()
        self.assertEqual(b.side_length, 3)
        self.assertEqual(b.cells, (Tile.EMPTY,) * 9)
        self.assertIs(b.evaluate(), Outcome.NONE)

    def test_example_game_progression(self):
        b = standard()
        b = b.place(Tile.X, 0)
        b = b.place(Tile.O, 4)
        b = b.place(Tile.X, 3)
        self.assertIs(b.evaluate(), Outcome.NONE)
        b = b.place(Tile.O, 1)
        b = b.place(Tile.X, 6)
        self.assertIs(b.evaluate(), Outcome.X_WINS)
        self.assertIs(b.evaluate().winner, Player.X)

    def test_facade_constructors_match_board_classmethods(self):
        self.assertEqual(new_empty(4), Board.new_empty(4))
        b = play_indices(standard(), Tile.O, [2, 5])
        self.assertEqual(from_cells(3, b.cells), b)


if __name__ == '__main__':
    unittest.main()
