from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from .board import Board, BoardKey, Coord
from .config import debug_enabled
from .moves import apply_move, cluster_representatives

# Extra plies explored when scoring a candidate. Cost grows with clusters ** depth.
LOOKAHEAD_DEPTH = 1


@dataclass
class Candidate:
    """A board in the frontier and the moves that led to it from the solver's start board."""
    board: Board
    path: List[Coord]


@dataclass
class SolveResult:
    """Outcome of a beam search run."""
    solved: bool
    moves: Optional[List[Coord]]
    depth: int
    explored: int


def score_board(board: Board) -> float:
    """Static heuristic: more empty cells and a bigger remaining cluster are better, fewer moves are better."""
    return (board.empty_tiles() + board.largest_cluster()) * 10 / (len(board.moves) + 1)


def lookahead_score(board: Board, depth: int = LOOKAHEAD_DEPTH) -> float:
    """Best static score reachable within `depth` further moves."""
    if depth <= 0 or board.is_solved():
        return score_board(board)
    reps = cluster_representatives(board)
    if not reps:
        return score_board(board)
    return max(lookahead_score(apply_move(board, move), depth - 1) for move in reps)


def _debug(msg: str) -> None:
    if debug_enabled():
        print(f"[beam] {msg}")


class Solver:
    """
    Beam search for a move sequence that clears the board.

    Each layer expands every frontier board by every valid move, drops boards seen anywhere
    earlier in the search, scores the rest and keeps the best `beam_width`. The first cleared
    board found ends the search; the result is a solution, not necessarily the shortest one.
    """

    def __init__(self, board: Board, max_depth: int, beam_width: int):
        if max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        if beam_width <= 0:
            raise ValueError(f"beam_width must be positive, got {beam_width}")
        self.board = board.clone()
        self.max_depth = max_depth
        self.beam_width = beam_width

    def beam_search(self) -> Optional[List[Coord]]:
        """Returns the moves that clear the board, or None if none were found within the limits."""
        return self.solve().moves

    def solve(self) -> SolveResult:
        start = self.board.clone()
        if start.is_solved():
            return SolveResult(solved=True, moves=[], depth=0, explored=0)

        seen: Set[BoardKey] = {start.key()}
        frontier: List[Candidate] = [Candidate(start, [])]
        explored = 0

        for depth in range(1, self.max_depth + 1):
            successors, solution = self._expand(frontier, seen)
            explored += len(successors) + (1 if solution is not None else 0)
            if solution is not None:
                _debug(f"solved at depth {depth} after {explored} boards")
                return SolveResult(solved=True, moves=solution.path, depth=depth, explored=explored)
            if not successors:
                _debug(f"frontier exhausted at depth {depth}")
                return SolveResult(solved=False, moves=None, depth=depth, explored=explored)
            frontier = self._select(successors)
            _debug(f"depth {depth}: {len(successors)} new boards, kept {len(frontier)}")

        for cand in frontier:
            if cand.board.is_solved():
                return SolveResult(solved=True, moves=cand.path, depth=self.max_depth, explored=explored)
        _debug(f"no solution within depth {self.max_depth}")
        return SolveResult(solved=False, moves=None, depth=self.max_depth, explored=explored)

    def _expand(self, frontier: List[Candidate], seen: Set[BoardKey]) -> Tuple[List[Candidate], Optional[Candidate]]:
        """Applies every valid move to every candidate. Stops early on the first cleared board."""
        successors: List[Candidate] = []
        for cand in frontier:
            for move in cand.board.valid_moves():
                child = apply_move(cand.board, move)
                key = child.key()
                if key in seen:
                    continue
                seen.add(key)
                nxt = Candidate(child, cand.path + [move])
                if child.is_solved():
                    return successors, nxt
                successors.append(nxt)
        return successors, None

    def _select(self, successors: List[Candidate]) -> List[Candidate]:
        # sorted() is stable, so equal scores keep row-major expansion order.
        scored = [(lookahead_score(cand.board), cand) for cand in successors]
        scored.sort(key=lambda item: item[0], reverse=True)
        return [cand for _, cand in scored[:self.beam_width]]
