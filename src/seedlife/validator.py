# Verify that a submitted final grid is the continuation of its seed.

import json
import logging
from typing import List, NamedTuple, Optional

from seedlife.config import MAXIMUM_LOOP_TURN_COUNT, MAXIMUM_STEP_COUNT
from seedlife.errors import MalformedInput
from seedlife.game_state import GameState, grids_are_identical
from seedlife.history import History
from seedlife.seeds import default_catalog
from seedlife.serializer import deserialize_cellules
from seedlife.simulation import run_until_loop


class Modification(NamedTuple):
    step_index: int
    grid_index: int


class SerializedGameState(NamedTuple):
    cellules: str
    active: bool
    cellules_width: int
    cellules_height: int


class Submission(NamedTuple):
    submission_id: str
    game_state: SerializedGameState
    modifications: List[Modification]
    seed_label: str
    step_count: Optional[int] = None
    active_count: Optional[int] = None


class ValidationResult(NamedTuple):
    valid: bool
    submission_id: str
    steps: int
    in_loop: bool

    def to_dict(self):
        return {'valid': self.valid, 'submission_id': self.submission_id}


def _field(obj, key, kind, where, optional = False):
    if not isinstance(obj, dict):
        raise MalformedInput('{} must be an object'.format(where))
    if key not in obj:
        if optional:
            return None
        raise MalformedInput('Missing field {}.{}'.format(where, key))
    value = obj[key]
    # bool is an int subclass, but never a valid count or index.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        if optional and value is None:
            return None
        raise MalformedInput('Field {}.{} has wrong type {}'.format(
            where, key, type(value).__name__))
    return value


def parse_submission(payload):
    """ Read a decoded JSON object into a Submission.
    Raise MalformedInput if the object does not have the expected shape.
    """
    sub = _field(payload, 'submission', dict, 'input')
    gs = _field(sub, 'game_state', dict, 'submission')
    game_state = SerializedGameState(
        cellules = _field(gs, 'cellules', str, 'game_state'),
        active = _field(gs, 'active', bool, 'game_state'),
        cellules_width = _field(gs, 'cellules_width', int, 'game_state'),
        cellules_height = _field(gs, 'cellules_height', int, 'game_state'),
        )
    if game_state.cellules_width <= 0 or game_state.cellules_height <= 0:
        raise MalformedInput('Grid dimensions must be positive, got {}x{}'.format(
            game_state.cellules_width, game_state.cellules_height))
    modifications = list()
    for j, mod in enumerate(_field(sub, 'modifications', list, 'submission')):
        where = 'modifications[{}]'.format(j)
        modifications.append(Modification(
            _field(mod, 'step_index', int, where),
            _field(mod, 'grid_index', int, where)))
    return Submission(
        submission_id = _field(payload, '_id', str, 'input'),
        game_state = game_state,
        modifications = modifications,
        seed_label = _field(sub, 'seed_label', str, 'submission'),
        step_count = _field(sub, 'step_count', int, 'submission', optional=True),
        active_count = _field(sub, 'active_count', int, 'submission', optional=True),
        )


def load_submission(text):
    """ text may be str or bytes; bytes are decoded by json.loads.
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedInput('Input is not valid JSON: {}'.format(e)) from e
    return parse_submission(payload)


def replay_submission(submission, catalog = None, max_steps = MAXIMUM_STEP_COUNT,
                      loop_capacity = MAXIMUM_LOOP_TURN_COUNT):
    """ Rebuild the game the submission claims to have played.
    Return the final GameState and the SimulationResult.
    """
    if catalog is None:
        catalog = default_catalog()
    seed = catalog.get(submission.seed_label)
    width = submission.game_state.cellules_width
    height = submission.game_state.cellules_height
    try:
        game_state = GameState.from_seed(seed, width, height)
    except ValueError as e:
        raise MalformedInput(str(e)) from e

    for mod in submission.modifications:
        # Only changes made before the first step are replayed.
        if mod.step_index != 0:
            logging.info('Ignoring modification {} at step {}.'.format(
                mod.grid_index, mod.step_index))
            continue
        if not 0 <= mod.grid_index < game_state.size:
            raise MalformedInput('Modification index {} outside a grid of {} cellules'.format(
                mod.grid_index, game_state.size))
        game_state.toggle_cellule(mod.grid_index)

    result = run_until_loop(game_state, History(loop_capacity), max_steps)
    return game_state, result


def validate_submission(submission, catalog = None, max_steps = MAXIMUM_STEP_COUNT,
                        loop_capacity = MAXIMUM_LOOP_TURN_COUNT):
    game_state, result = replay_submission(submission, catalog, max_steps, loop_capacity)
    submitted = deserialize_cellules(submission.game_state.cellules)
    valid = grids_are_identical(game_state.cellules, submitted)
    if not valid:
        if len(submitted) != len(game_state.cellules):
            logging.warning('Submission {} has {} cellules, expected {}.'.format(
                submission.submission_id, len(submitted), len(game_state.cellules)))
        else:
            logging.warning('Submission {} does not match the computed grid.'.format(
                submission.submission_id))
    logging.info('Submission {} valid={} after {} steps.'.format(
        submission.submission_id, valid, result.steps))
    return ValidationResult(valid, submission.submission_id, result.steps, result.in_loop)
