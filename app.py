from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Board,
    Coord,
    ParseError,
    deal_board,
    parse_board,
    solve_board,
)

app = Flask(__name__)


def board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "cells": b.to_text().split("\n"),
        "moves": [[int(r), int(c)] for (r, c) in b.moves],
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Builds a Board from {"cells": [...row strings...], "moves": [[r, c], ...]}. Raises ValueError."""
    rows = obj.get("cells")
    if not isinstance(rows, list) or not rows:
        raise ValueError("cells must be a non-empty list of row strings")
    board = parse_board("\n".join(str(row) for row in rows))
    board.moves = [(int(r), int(c)) for r, c in obj.get("moves", [])]
    return board


def _move_from_json(value: Any) -> Coord:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError("move must be [row, col]")
    return (int(value[0]), int(value[1]))


def _moves_to_json(moves: List[Coord]) -> List[List[int]]:
    return [[int(r), int(c)] for (r, c) in moves]


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _bad_request(msg: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": msg}), 400


def _board_from_body(body: Dict[str, Any]) -> Board:
    b = body.get("board")
    if not isinstance(b, dict):
        raise ValueError("board required")
    return board_from_json(b)


def _optional_int(body: Dict[str, Any], name: str) -> Optional[int]:
    val = body.get(name)
    return None if val is None else int(val)


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        if "text" in body:
            board = parse_board(str(body["text"]))
        else:
            rows = int(body.get("rows", 6))
            cols = int(body.get("cols", 6))
            board = deal_board(rows, cols, seed=_optional_int(body, "seed"))
    except (ParseError, ValueError, TypeError) as e:
        return _bad_request(f"bad board: {e}")
    return jsonify({
        "ok": True,
        "board": board_to_json(board),
        "validMoves": _moves_to_json(board.valid_moves()),
    })


@app.post("/api/valid")
def api_valid() -> Any:
    try:
        board = _board_from_body(_body())
    except (ValueError, TypeError) as e:
        return _bad_request(f"bad board: {e}")
    return jsonify({"ok": True, "validMoves": _moves_to_json(board.valid_moves())})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    try:
        board = _board_from_body(body)
        move = _move_from_json(body.get("move"))
    except (ValueError, TypeError) as e:
        return _bad_request(f"bad request: {e}")
    r, c = move
    if not board.in_bounds(r, c) or board.cells[r][c] is None:
        return jsonify({
            "ok": False,
            "error": "Illegal move",
            "validMoves": _moves_to_json(board.valid_moves()),
        }), 400
    board.remove(r, c)
    return jsonify({
        "ok": True,
        "board": board_to_json(board),
        "validMoves": _moves_to_json(board.valid_moves()),
        "solved": board.is_solved(),
    })


@app.post("/api/solve")
def api_solve() -> Any:
    body = _body()
    try:
        board = _board_from_body(body)
        res = solve_board(board, max_depth=_optional_int(body, "depth"), beam_width=_optional_int(body, "width"))
    except (ValueError, TypeError) as e:
        return _bad_request(f"bad request: {e}")
    return jsonify({
        "ok": True,
        "solved": bool(res.solved),
        "moves": _moves_to_json(res.moves) if res.moves is not None else None,
        "depth": res.depth,
        "explored": res.explored,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=debug)
