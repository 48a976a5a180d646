# Named initial grids ("seeds") and the catalog they are looked up in.

import functools
from typing import NamedTuple, Tuple

from seedlife import raw_seeds
from seedlife.config import CELLULES_HEIGHT, CELLULES_WIDTH
from seedlife.errors import SeedNotFound
from seedlife.game_state import LifeState


class Seed(NamedTuple):
    label: str
    cellules: Tuple[LifeState, ...]

    def __str__(self):
        return self.label


def parse_raw_seed(raw_seed):
    return tuple(LifeState.ALIVE if n == 1 else LifeState.DEAD for n in raw_seed)


def seed_pentadecathlon(cellule_width, cellule_height):
    """ A pentadecathlon centered on the grid: a 3x8 block of live cells
    with two dead cells in its middle row.
    """
    middle_row = cellule_height // 2
    middle_col = cellule_width // 2
    cellules = list()
    for r in range(cellule_height):
        for c in range(cellule_width):
            in_block = (abs(r - middle_row) <= 1
                        and middle_col - 5 < c < middle_col + 4)
            in_gap = r == middle_row and c in (middle_col - 3, middle_col + 2)
            if in_block and not in_gap:
                cellules.append(LifeState.ALIVE)
            else:
                cellules.append(LifeState.DEAD)
    return tuple(cellules)


def seed_middle_line_starter(cellule_width, cellule_height):
    """ A horizontal line of 13 live cells through the grid center.
    """
    middle_row = cellule_height // 2
    middle_col = cellule_width // 2
    cellules = list()
    for r in range(cellule_height):
        for c in range(cellule_width):
            if r == middle_row and middle_col - 7 < c < middle_col + 7:
                cellules.append(LifeState.ALIVE)
            else:
                cellules.append(LifeState.DEAD)
    return tuple(cellules)


class SeedCatalog:
    """ Read-only registry of seeds, keyed by label.
    """

    def __init__(self, seeds):
        self._seeds = tuple(seeds)
        self._by_label = {seed.label: seed for seed in self._seeds}
        if len(self._by_label) != len(self._seeds):
            raise ValueError('Seed labels must be unique.')


    def __iter__(self):
        return iter(self._seeds)


    def __len__(self):
        return len(self._seeds)


    def __contains__(self, label):
        return label in self._by_label


    def labels(self):
        return [seed.label for seed in self._seeds]


    def get(self, label):
        try:
            return self._by_label[label]
        except KeyError:
            raise SeedNotFound(label) from None


def get_seeds(width = CELLULES_WIDTH, height = CELLULES_HEIGHT):
    return [
        Seed('Bim', parse_raw_seed(raw_seeds.seed_raw_bim_array())),
        Seed('C', parse_raw_seed(raw_seeds.seed_raw_c_array())),
        Seed('Coles', parse_raw_seed(raw_seeds.seed_raw_coles_array())),
        Seed('Cube', parse_raw_seed(raw_seeds.seed_raw_cube_array())),
        Seed('Diamond', parse_raw_seed(raw_seeds.seed_raw_diamond_array())),
        Seed('Glider', parse_raw_seed(raw_seeds.seed_raw_glider_array())),
        Seed('hmm', parse_raw_seed(raw_seeds.seed_raw_hmm_array())),
        Seed('Forty Two', parse_raw_seed(raw_seeds.seed_raw_forty_two_array())),
        Seed('Line', seed_middle_line_starter(width, height)),
        Seed('Ligma', parse_raw_seed(raw_seeds.seed_raw_ligma_array())),
        Seed('Mr Sir', parse_raw_seed(raw_seeds.seed_raw_mrsir_array())),
        Seed('Pentadecathlon', seed_pentadecathlon(width, height)),
        Seed('Wall', parse_raw_seed(raw_seeds.seed_raw_wall_array())),
        Seed('Windmills', parse_raw_seed(raw_seeds.seed_raw_windmills_array())),
        ]


@functools.lru_cache(maxsize=None)
def default_catalog():
    return SeedCatalog(get_seeds())
