from __future__ import annotations

from typing import Iterable, List

from .board import Board, Coord


def apply_move(board: Board, move: Coord) -> Board:
    """Applies a move to a copy of the board and returns the copy."""
    child = board.clone()
    child.remove(*move)
    return child


def cluster_representatives(board: Board) -> List[Coord]:
    """One move per cluster: its first cell in row-major order. Every cell of a cluster gives the same board."""
    return [min(region) for region in board.clusters()]


def replay_moves(board: Board, moves: Iterable[Coord]) -> Board:
    """
    Replays recorded moves on the board in place, checking bounds first.
    Returns the same board for chaining.
    """
    for i, (r, c) in enumerate(moves):
        if not board.in_bounds(r, c):
            raise ValueError(f"Move {i + 1} ({r}, {c}) is outside the {board.rows}x{board.cols} board")
        board.remove(r, c)
    return board
