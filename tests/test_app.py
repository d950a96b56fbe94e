import json
import unittest

from app import app as flask_app
from app import board_to_json, json_to_board, BadPayload
import app as app_mod
from game import Board


def _board(rows):
    return board_to_json(Board.from_rows(rows))


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def test_given_health_when_requested_then_ok(self):
        r = self.client.get("/api/health")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.get_json()["ok"])

    def test_given_board_json_when_converting_then_round_trips(self):
        b = Board.from_rows(["X.O", "...", "..X"])
        self.assertEqual(json_to_board(board_to_json(b)), b)
        with self.assertRaises(BadPayload):
            json_to_board({"sideLength": 3})
        with self.assertRaises(BadPayload):
            json_to_board({"sideLength": "3", "cells": ["."] * 9})
        with self.assertRaises(BadPayload):
            json_to_board({"sideLength": 1, "cells": ["Q"]})

    def test_given_new_request_when_posted_then_empty_board(self):
        r = self._post("/api/new", {})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["board"]["sideLength"], 3)
        self.assertEqual(data["board"]["cells"], ["."] * 9)
        self.assertEqual(data["openIndices"], list(range(9)))
        self.assertEqual(data["outcome"], "none")
        self.assertFalse(data["over"])

        r = self._post("/api/new", {"size": "4"})
        self.assertEqual(r.get_json()["board"]["sideLength"], 4)

    def test_given_bad_size_when_new_then_400_invalid_dimension(self):
        r = self._post("/api/new", {"size": 0})
        self.assertEqual(r.status_code, 400)
        data = r.get_json()
        self.assertFalse(data["ok"])
        self.assertEqual(data["kind"], "InvalidDimension")

    def test_given_oversized_size_when_new_then_400(self):
        for size in (app_mod.MAX_SIDE + 1, 100000, str(app_mod.MAX_SIDE + 1)):
            r = self._post("/api/new", {"size": size})
            self.assertEqual(r.status_code, 400)
            data = r.get_json()
            self.assertFalse(data["ok"])
            self.assertIn("exceeds", data["error"])
        r = self._post("/api/new", {"size": app_mod.MAX_SIDE})
        self.assertEqual(r.status_code, 200)

    def test_given_oversized_side_length_when_evaluate_then_400(self):
        side = app_mod.MAX_SIDE + 1
        r = self._post("/api/evaluate", {"board": {"sideLength": side, "cells": ["."] * (side * side)}})
        self.assertEqual(r.status_code, 400)
        self.assertIn("exceeds", r.get_json()["error"])

    def test_given_non_list_cells_when_converting_then_bad_payload(self):
        with self.assertRaises(BadPayload):
            json_to_board({"sideLength": 3, "cells": "X........"})
        with self.assertRaises(BadPayload):
            json_to_board({"sideLength": 1, "cells": {"X": 1}})
        r = self._post("/api/evaluate", {"board": {"sideLength": 3, "cells": "X........"}})
        self.assertEqual(r.status_code, 400)
        self.assertIn("cells must be a list", r.get_json()["error"])

    def test_given_winning_board_when_evaluate_then_winner_and_line(self):
        r = self._post("/api/evaluate", {"board": _board(["..X", ".X.", "X.O"])})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["outcome"], "x")
        self.assertEqual(data["winner"], "X")
        self.assertTrue(data["over"])
        self.assertEqual(data["winningLine"], [2, 4, 6])
        self.assertTrue(data["text"].endswith("side_length: 3"))

    def test_given_drawn_board_when_evaluate_then_draw(self):
        r = self._post("/api/evaluate", {"board": _board(["XOX", "XOO", "OXX"])})
        data = r.get_json()
        self.assertEqual(data["outcome"], "draw")
        self.assertIsNone(data["winner"])
        self.assertIsNone(data["winningLine"])

    def test_given_mismatched_cells_when_evaluate_then_400(self):
        r = self._post("/api/evaluate", {"board": {"sideLength": 3, "cells": ["."] * 8}})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["kind"], "DimensionMismatch")

    def test_given_occupied_cell_when_place_then_overwritten(self):
        r = self._post("/api/place", {"board": _board(["X..", "...", "..."]), "tile": "O", "index": 0})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["board"]["cells"][0], "O")

    def test_given_out_of_range_index_when_place_then_400(self):
        for idx in (-1, 9):
            r = self._post("/api/place", {"board": _board(["...", "...", "..."]), "tile": "X", "index": idx})
            self.assertEqual(r.status_code, 400)
            self.assertEqual(r.get_json()["kind"], "IndexOutOfBounds")

    def test_given_missing_fields_when_place_then_400(self):
        r = self._post("/api/place", {"board": _board(["...", "...", "..."]), "index": 0})
        self.assertEqual(r.status_code, 400)
        r = self._post("/api/place", {"board": _board(["...", "...", "..."]), "tile": "X", "index": "0"})
        self.assertEqual(r.status_code, 400)
        r = self.client.post("/api/place", data="not json", content_type="application/json")
        self.assertEqual(r.status_code, 400)

    def test_given_moves_when_posting_then_turns_alternate(self):
        r = self._post("/api/move", {"board": _board(["...", "...", "..."]), "index": 4})
        data = r.get_json()
        self.assertEqual(data["player"], "X")
        r = self._post("/api/move", {"board": data["board"], "index": 0})
        data = r.get_json()
        self.assertEqual(data["player"], "O")
        self.assertEqual(data["board"]["cells"][0], "O")
        self.assertEqual(data["openIndices"], [1, 2, 3, 5, 6, 7, 8])

    def test_given_occupied_cell_when_move_then_400(self):
        r = self._post("/api/move", {"board": _board(["X..", "...", "..."]), "index": 0})
        self.assertEqual(r.status_code, 400)
        self.assertIn("already taken", r.get_json()["error"])

    def test_given_finished_game_when_move_then_400(self):
        r = self._post("/api/move", {"board": _board(["XXX", "OO.", "..."]), "index": 5})
        self.assertEqual(r.status_code, 400)
        self.assertIn("over", r.get_json()["error"])

    def test_given_winning_move_when_posted_then_game_over(self):
        r = self._post("/api/move", {"board": _board(["XX.", "OO.", "..."]), "index": 2})
        data = r.get_json()
        self.assertEqual(r.status_code, 200)
        self.assertTrue(data["over"])
        self.assertEqual(data["winner"], "X")
        self.assertEqual(data["winningLine"], [0, 1, 2])


if __name__ == "__main__":
    unittest.main(verbosity=2)
