import unittest

from seedlife.game_state import GameState, LifeState
from seedlife.history import History


def grid_of(number, length = 12):
    # Distinct grids from the binary digits of number.
    return [LifeState((number >> j) & 1) for j in range(length)]


class TestHistory(unittest.TestCase):

    def test_still_life_loops_immediately(self):
        cells = [0] * (50 * 40)
        for idx in (20 * 50 + 24, 20 * 50 + 25, 21 * 50 + 24, 21 * 50 + 25):
            cells[idx] = 1
        gs = GameState(cells, 50, 40)
        history = History()
        gs.step()
        self.assertFalse(history.is_in_loop(gs.cellules))
        gs.step()
        self.assertTrue(history.is_in_loop(gs.cellules))

    def test_never_exceeds_capacity(self):
        history = History()
        for j in range(1700):
            self.assertFalse(history.is_in_loop(grid_of(j)))
            self.assertLessEqual(len(history), 1600)
        self.assertEqual(len(history), 1600)
        # The oldest grids were dropped; the newest are kept.
        self.assertFalse(history.is_in_loop(grid_of(0)))
        self.assertTrue(history.is_in_loop(grid_of(1699)))
        self.assertEqual(len(history), 1600)

    def test_eviction_order(self):
        history = History(capacity=3)
        for j in range(4):
            history.is_in_loop(grid_of(j))
        self.assertEqual(history.previous_steps,
                         tuple(tuple(grid_of(j)) for j in (1, 2, 3)))
        self.assertFalse(history.is_in_loop(grid_of(0)))
        self.assertTrue(history.is_in_loop(grid_of(3)))

    def test_repeated_grid_survives_one_eviction(self):
        history = History(capacity=3)
        history.is_in_loop(grid_of(5))
        history.is_in_loop(grid_of(5))
        history.is_in_loop(grid_of(6))
        history.is_in_loop(grid_of(7))
        # One copy of grid 5 was evicted, the other is still recorded.
        self.assertTrue(history.is_in_loop(grid_of(5)))

    def test_last_cell_difference_is_not_a_loop(self):
        history = History()
        grid = [LifeState.DEAD] * 20
        history.is_in_loop(grid)
        changed = list(grid)
        changed[-1] = LifeState.ALIVE
        self.assertFalse(history.is_in_loop(changed))

    def test_clear_previous_steps(self):
        history = History()
        history.is_in_loop(grid_of(3))
        history.clear_previous_steps()
        self.assertEqual(len(history), 0)
        self.assertFalse(history.is_in_loop(grid_of(3)))

    def test_bad_capacity(self):
        with self.assertRaises(ValueError):
            History(capacity=0)


if __name__ == "__main__":
    unittest.main()
