"""
Tilefall core Python package.

Pure-logic pieces of the tile-clearing puzzle, kept separate from the CLI and
web entry points so they can be tested in isolation.
Modules:
- color.py: Color
- board.py: Board (removal, gravity, cluster queries, rendering)
- flood.py: cell-level flood clear, gravity and cluster measurement
- moves.py: apply_move, replay_moves
- solver.py: Solver (beam search with lookahead scoring)
- parser.py, deal.py: board/move text parsing and random boards
"""
