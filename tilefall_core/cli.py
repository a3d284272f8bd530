from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .board import Board
from .config import SolverSettings
from .deal import deal_board, parse_dims
from .moves import replay_moves
from .parser import parse_board, parse_coord, parse_moves
from .solver import Solver


def _read_text(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as fh:
        return fh.read()


def _load_board(args: argparse.Namespace) -> Board:
    if args.random:
        rows, cols = parse_dims(args.random)
        return deal_board(rows, cols, seed=args.seed)
    if not args.file:
        raise ValueError('a board FILE or --random ROWSxCOLS is required')
    return parse_board(_read_text(args.file))


def run_solve(board: Board, max_depth: Optional[int] = None, beam_width: Optional[int] = None) -> int:
    settings = SolverSettings.from_env(max_depth=max_depth, beam_width=beam_width)
    print('Initial board:')
    print(board.pretty())
    solver = Solver(board, settings.max_depth, settings.beam_width)
    res = solver.solve()
    if not res.solved or res.moves is None:
        print(f'No solution found (depth {settings.max_depth}, width {settings.beam_width}).')
        return 1
    print('Moves:')
    for i, move in enumerate(res.moves):
        print(f'{i + 1}) {move}')
    return 0


def run_play(board: Board) -> int:
    """Interactive loop: one coordinate per prompt until the board is cleared or the user quits."""
    if board.is_solved():
        print(board.pretty())
        print(f'Congratulations! You won in {len(board.moves)} moves!')
        return 0
    while True:
        print(board.pretty())
        try:
            text = input("Enter a coordinate in the format 'row,col' or 'q' to quit: ").strip()
        except EOFError:
            print('Goodbye!')
            return 0
        if text == 'q':
            print('Goodbye!')
            return 0
        try:
            r, c = parse_coord(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if not board.in_bounds(r, c):
            print(f'({r}, {c}) is off the {board.rows}x{board.cols} board. Try again.')
            continue
        board.remove(r, c)
        if board.is_solved():
            print(board.pretty())
            print(f'Congratulations! You won in {len(board.moves)} moves!')
            return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Tilefall board solver and player')
    sub = parser.add_subparsers(dest='command', required=True)

    def add_board_args(p: argparse.ArgumentParser) -> None:
        p.add_argument('file', nargs='?', help='Board file (rows of O/P/B/G, "." for empty)')
        p.add_argument('--random', metavar='ROWSxCOLS', help='Deal a random board instead of reading FILE')
        p.add_argument('--seed', type=int, default=None, help='RNG seed for --random')

    p_solve = sub.add_parser('solve', help='Search for a move sequence that clears the board')
    add_board_args(p_solve)
    p_solve.add_argument('--depth', type=int, default=None, help='Maximum search depth (TILEFALL_MAX_DEPTH)')
    p_solve.add_argument('--width', type=int, default=None, help='Beam width (TILEFALL_BEAM_WIDTH)')

    p_play = sub.add_parser('play', help='Play the board interactively')
    add_board_args(p_play)
    p_play.add_argument('--moves', default=None, help='File of row,col moves to replay before playing')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        board = _load_board(args)
        if args.command == 'solve':
            return run_solve(board, max_depth=args.depth, beam_width=args.width)
        if args.moves:
            replay_moves(board, parse_moves(_read_text(args.moves)))
        return run_play(board)
    except (ValueError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
