from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    Board,
    BoardError,
    IllegalMove,
    Outcome,
    Tile,
    checked_move,
    next_player,
)

logger = logging.getLogger(__name__)

DEFAULT_SIDE = int(os.getenv("TICTACTOE_SIDE", "3"))
MAX_SIDE = int(os.getenv("TICTACTOE_MAX_SIDE", "32"))

app = Flask(__name__)


class BadPayload(Exception):
    """Malformed request payload."""


# ---------- JSON conversion ----------

def board_to_json(b: Board) -> Dict[str, Any]:
    return {"sideLength": int(b.side_length), "cells": [t.glyph for t in b.cells]}


def _check_max_side(side: int) -> None:
    if side > MAX_SIDE:
        raise BadPayload(f"side length {side} exceeds the limit of {MAX_SIDE}")


def json_to_board(obj: Any) -> Board:
    if not isinstance(obj, dict):
        raise BadPayload("board required")
    side = obj.get("sideLength")
    if isinstance(side, bool) or not isinstance(side, int):
        raise BadPayload("bad board: sideLength must be an integer")
    _check_max_side(side)
    cells = obj.get("cells")
    if not isinstance(cells, list):
        raise BadPayload("bad board: cells must be a list")
    try:
        tiles = [Tile.parse(x) for x in cells]
    except ValueError as e:
        raise BadPayload(f"bad board: {e}") from None
    return Board.from_cells(side, tiles)


def outcome_to_json(o: Outcome) -> Dict[str, Any]:
    return {
        "outcome": o.value,
        "winner": o.winner.value if o.winner is not None else None,
        "over": o.is_over,
    }


def _state_json(b: Board) -> Dict[str, Any]:
    o = b.evaluate()
    line: Optional[List[int]] = None
    wl = b.winning_line()
    if wl is not None:
        line = list(wl)
    return {
        "ok": True,
        "board": board_to_json(b),
        "openIndices": b.open_indices(),
        "winningLine": line,
        **outcome_to_json(o),
    }


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise BadPayload("JSON object body required")
    return body


def _int_field(body: Dict[str, Any], key: str) -> int:
    v = body.get(key)
    if isinstance(v, bool) or not isinstance(v, int):
        raise BadPayload(f"{key} must be an integer")
    return v


# ---------- Error handlers ----------

@app.errorhandler(BoardError)
def handle_board_error(e: BoardError) -> Any:
    logger.warning("rejected board input on %s: %s", request.path, e)
    return jsonify({"ok": False, "error": str(e), "kind": type(e).__name__}), 400


@app.errorhandler(BadPayload)
def handle_bad_request(e: BadPayload) -> Any:
    logger.warning("bad request on %s: %s", request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(IllegalMove)
def handle_illegal_move(e: IllegalMove) -> Any:
    logger.warning("illegal move on %s: %s", request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    size = body.get("size", DEFAULT_SIDE) if isinstance(body, dict) else DEFAULT_SIDE
    if isinstance(size, str) and size.strip().isdigit():
        size = int(size)
    if isinstance(size, int) and not isinstance(size, bool):
        _check_max_side(size)
    return jsonify(_state_json(Board.new_empty(size)))


@app.post("/api/evaluate")
def api_evaluate() -> Any:
    board = json_to_board(_body().get("board"))
    out = _state_json(board)
    out["text"] = board.pretty()
    return jsonify(out)


@app.post("/api/place")
def api_place() -> Any:
    """Unconditional placement: occupied cells are overwritten."""
    body = _body()
    board = json_to_board(body.get("board"))
    if "tile" not in body:
        raise BadPayload("tile required")
    try:
        tile = Tile.parse(body["tile"])
    except ValueError as e:
        raise BadPayload(str(e)) from None
    index = _int_field(body, "index")
    return jsonify(_state_json(board.place(tile, index)))


@app.post("/api/move")
def api_move() -> Any:
    """Turn-checked move for the player whose turn it is."""
    body = _body()
    board = json_to_board(body.get("board"))
    index = _int_field(body, "index")
    if board.evaluate().is_over:
        raise IllegalMove("game is already over")
    player = next_player(board)
    next_board = checked_move(board, player, index)
    out = _state_json(next_board)
    out["player"] = player.value
    if out["over"]:
        logger.info("game finished: %s", next_board.evaluate())
    return jsonify(out)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
