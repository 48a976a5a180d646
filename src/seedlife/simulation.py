# Driving loop: step a game until it repeats itself or the step cap is hit.

import logging
from typing import NamedTuple

from seedlife.config import MAXIMUM_STEP_COUNT


class SimulationResult(NamedTuple):
    steps: int
    in_loop: bool


def run_until_loop(game_state, history, max_steps = MAXIMUM_STEP_COUNT):
    """ Advance game_state in place. Stop at the first generation already
    seen in history, or after max_steps generations.
    """
    history.clear_previous_steps()
    steps = 0
    in_loop = False
    while steps < max_steps:
        game_state.step()
        steps += 1
        if history.is_in_loop(game_state.snapshot()):
            in_loop = True
            break
    if in_loop:
        logging.info('Loop found after {} steps.'.format(steps))
    else:
        logging.info('Reached step cap of {} without a loop.'.format(max_steps))
    return SimulationResult(steps, in_loop)
