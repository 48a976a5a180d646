import unittest

import numpy as np

from seedlife.game_state import GameState
from seedlife.history import History
from seedlife.seeds import default_catalog
from seedlife.simulation import SimulationResult, run_until_loop


def state_from_board(board):
    board = np.array(board)
    return GameState(board.flatten().tolist(), board.shape[1], board.shape[0])


class TestRunUntilLoop(unittest.TestCase):

    def test_still_life(self):
        board = np.zeros((6, 6), dtype=int)
        board[2:4, 2:4] = 1
        result = run_until_loop(state_from_board(board), History())
        self.assertEqual(result, SimulationResult(2, True))

    def test_blinker_period_two(self):
        board = np.zeros((6, 6), dtype=int)
        board[2, 1:4] = 1
        gs = state_from_board(board)
        result = run_until_loop(gs, History())
        self.assertEqual(result, SimulationResult(3, True))
        # Three steps of a blinker leave it vertical.
        self.assertEqual(gs.to_board()[1:4, 2].tolist(), [1, 1, 1])

    def test_step_cap(self):
        gs = GameState.from_seed(default_catalog().get('Glider'), 50, 40)
        result = run_until_loop(gs, History(), max_steps=10)
        self.assertEqual(result, SimulationResult(10, False))

    def test_glider_loops_around_the_torus(self):
        # 4 steps per cell, 200 cells to come back on a 50x40 torus.
        gs = GameState.from_seed(default_catalog().get('Glider'), 50, 40)
        result = run_until_loop(gs, History())
        self.assertEqual(result, SimulationResult(801, True))

    def test_history_is_cleared_between_runs(self):
        board = np.zeros((6, 6), dtype=int)
        board[2:4, 2:4] = 1
        history = History()
        run_until_loop(state_from_board(board), history)
        # Same block again: a stale history would report a loop at step 1.
        result = run_until_loop(state_from_board(board), history)
        self.assertEqual(result.steps, 2)


if __name__ == "__main__":
    unittest.main()
