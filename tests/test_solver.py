import unittest

from game import (
    Board,
    Color,
    LOOKAHEAD_DEPTH,
    Solver,
    apply_move,
    color_from_char,
    deal_board,
    lookahead_score,
    score_board,
)


def make_board(rows):
    return Board([[color_from_char(ch) for ch in r] for r in rows])


def replay(board, path):
    b = board.clone()
    for move in path:
        b.remove(*move)
    return b


class TestScoring(unittest.TestCase):
    def test_given_fresh_board_when_scored_then_cluster_weighted(self):
        board = make_board([
            "OO",
            "PB",
        ])
        # (0 empty + cluster of 2) * 10 / (0 moves + 1)
        self.assertEqual(score_board(board), 20.0)

    def test_given_board_after_move_when_scored_then_divided_by_moves(self):
        board = make_board([
            "OO",
            "PB",
        ])
        board.remove(1, 1)
        # O falls onto B's column: one empty cell, no cluster above 1, one move made
        self.assertEqual(score_board(board), 10.0)

    def test_given_zero_depth_when_lookahead_then_static_score(self):
        board = make_board(["OPO"])
        self.assertEqual(lookahead_score(board, 0), score_board(board))

    def test_given_single_cluster_when_lookahead_then_scores_cleared_board(self):
        board = make_board(["OOO"])
        # After the only distinct move: (3 empty + 0) * 10 / 2
        self.assertEqual(lookahead_score(board, 1), 15.0)

    def test_given_random_boards_when_lookahead_then_matches_trying_every_move(self):
        for seed in range(5):
            board = deal_board(3, 4, seed=seed)
            best = max(score_board(apply_move(board, m)) for m in board.valid_moves())
            self.assertEqual(lookahead_score(board, 1), best, f"seed={seed}")

    def test_lookahead_depth_is_small_constant(self):
        self.assertGreaterEqual(LOOKAHEAD_DEPTH, 0)
        self.assertLessEqual(LOOKAHEAD_DEPTH, 3)


class TestBeamSearch(unittest.TestCase):
    def test_given_invalid_limits_when_constructed_then_value_error(self):
        board = make_board(["OO"])
        with self.assertRaises(ValueError):
            Solver(board, 0, 5)
        with self.assertRaises(ValueError):
            Solver(board, 5, 0)

    def test_given_cleared_board_when_search_then_empty_path(self):
        board = make_board(["..", ".."])
        self.assertEqual(Solver(board, 5, 5).beam_search(), [])

    def test_given_single_cluster_when_search_then_one_move(self):
        board = make_board(["OOO"])
        self.assertEqual(Solver(board, 5, 5).beam_search(), [(0, 0)])

    def test_given_isolated_cells_when_depth_too_small_then_none(self):
        board = make_board(["OPBG"])
        self.assertIsNone(Solver(board, 3, 50).beam_search())
        res = Solver(board, 3, 50).solve()
        self.assertFalse(res.solved)
        self.assertIsNone(res.moves)

    def test_given_isolated_cells_when_depth_suffices_then_every_cell_removed(self):
        board = make_board(["OPBG"])
        path = Solver(board, 4, 1).beam_search()
        self.assertIsNotNone(path)
        assert path is not None
        self.assertEqual(len(path), 4)
        self.assertTrue(replay(board, path).is_solved())

    def test_given_repeated_positions_when_search_then_each_board_explored_once(self):
        board = make_board(["OPBG"])
        res = Solver(board, 4, 50).solve()
        self.assertTrue(res.solved)
        self.assertEqual(res.depth, 4)
        # 4 one-removal boards, 6 two-removal, 4 three-removal, then the first cleared board
        self.assertEqual(res.explored, 15)

    def test_given_random_boards_when_search_finds_path_then_replay_clears_board(self):
        found = 0
        for seed in range(8):
            board = deal_board(4, 4, seed=seed, colors=[Color.ORANGE, Color.PINK, Color.BLUE])
            path = Solver(board, 16, 8).beam_search()
            if path is None:
                continue
            found += 1
            self.assertLessEqual(len(path), 16)
            self.assertTrue(replay(board, path).is_solved(), f"seed={seed}")
        self.assertGreater(found, 0)

    def test_given_search_when_run_then_input_board_not_mutated(self):
        board = deal_board(4, 4, seed=11)
        before = [list(row) for row in board.cells]
        Solver(board, 16, 5).beam_search()
        self.assertEqual(board.cells, before)
        self.assertEqual(board.moves, [])

    def test_given_same_board_and_limits_when_run_twice_then_same_result(self):
        board = deal_board(5, 5, seed=3)
        first = Solver(board, 25, 6).solve()
        second = Solver(board, 25, 6).solve()
        self.assertEqual(first, second)

    def test_given_board_with_history_when_search_then_path_excludes_history(self):
        board = make_board(["OOP"])
        board.remove(0, 2)
        path = Solver(board, 3, 3).beam_search()
        self.assertEqual(path, [(0, 0)])


if __name__ == '__main__':
    unittest.main(verbosity=2)
