# Run every seed of a catalog and tabulate how each game ends.

import logging

import pandas as pd

from seedlife.config import (
    CELLULES_HEIGHT, CELLULES_WIDTH, MAXIMUM_LOOP_TURN_COUNT, MAXIMUM_STEP_COUNT)
from seedlife.game_state import GameState
from seedlife.history import History
from seedlife.simulation import run_until_loop


SURVEY_COLUMNS = ['label', 'start_lives', 'end_lives', 'steps', 'in_loop']


def survey_seeds(catalog, ncols = CELLULES_WIDTH, nrows = CELLULES_HEIGHT,
                 max_steps = MAXIMUM_STEP_COUNT, loop_capacity = MAXIMUM_LOOP_TURN_COUNT):
    history = History(loop_capacity)
    rows = list()
    for seed in catalog:
        game_state = GameState.from_seed(seed, ncols, nrows)
        start_lives = game_state.alive_count()
        result = run_until_loop(game_state, history, max_steps)
        rows.append([seed.label, start_lives, game_state.alive_count(),
                     result.steps, result.in_loop])
    df = pd.DataFrame(rows, columns=SURVEY_COLUMNS).set_index('label')
    logging.info('Seed survey\n{}'.format(df))
    return df
