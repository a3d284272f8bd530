from __future__ import annotations

# Facade module that re-exports Tilefall core functionality.
# Used by the Flask app and the tests; single-responsibility modules live under tilefall_core/*.

from tilefall_core.board import Board, BoardKey, Coord
from tilefall_core.color import Color, EMPTY_SYMBOL, color_from_char
from tilefall_core.config import SolverSettings, debug_enabled
from tilefall_core.deal import deal_board, parse_dims
from tilefall_core.flood import (
    neighbors,
    flood_clear,
    apply_gravity,
    measure_cluster,
)
from tilefall_core.moves import (
    apply_move,
    cluster_representatives,
    replay_moves,
)
from tilefall_core.parser import ParseError, parse_board, parse_coord, parse_moves
from tilefall_core.solver import (
    LOOKAHEAD_DEPTH,
    Candidate,
    SolveResult,
    Solver,
    score_board,
    lookahead_score,
)


def solve_board(board: Board, max_depth: int | None = None, beam_width: int | None = None) -> SolveResult:
    """Runs the beam search with limits from the arguments, falling back to the environment."""
    settings = SolverSettings.from_env(max_depth=max_depth, beam_width=beam_width)
    return Solver(board, settings.max_depth, settings.beam_width).solve()


def main() -> None:
    # CLI driver delegated to tilefall_core.cli
    from tilefall_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
