# Bounded record of past grids, used to detect endless loops.

import collections
import logging

from seedlife.config import MAXIMUM_LOOP_TURN_COUNT
from seedlife.game_state import grids_are_identical


class History:

    def __init__(self, capacity = MAXIMUM_LOOP_TURN_COUNT):
        if capacity < 1:
            raise ValueError('History capacity must be positive, got {}'.format(capacity))
        self.capacity = capacity
        self._previous_steps = collections.deque()
        # Snapshot -> number of copies currently in the window.
        self._seen = collections.Counter()


    def __len__(self):
        return len(self._previous_steps)


    @property
    def previous_steps(self):
        return tuple(self._previous_steps)


    def is_in_loop(self, current_grid):
        """ Return True if current_grid matches any recorded grid,
        then record current_grid. The oldest grids are dropped so
        that at most self.capacity grids are kept.
        """
        current_grid = tuple(current_grid)
        in_endless_loop = False
        # The counter narrows the candidates; equality is still checked in full.
        if self._seen[current_grid] > 0:
            for previous_step in self._previous_steps:
                if grids_are_identical(previous_step, current_grid):
                    logging.info('IN A LOOP: Game grids are identical.')
                    in_endless_loop = True
                    break

        while len(self._previous_steps) >= self.capacity:
            evicted = self._previous_steps.popleft()
            self._seen[evicted] -= 1
            if self._seen[evicted] == 0:
                del self._seen[evicted]
        self._previous_steps.append(current_grid)
        self._seen[current_grid] += 1

        return in_endless_loop


    def clear_previous_steps(self):
        self._previous_steps.clear()
        self._seen.clear()
