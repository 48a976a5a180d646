# Implementation of Conway's Game of Life on a toroidal grid.

import enum

import numpy as np


class LifeState(enum.IntEnum):
    DEAD = 0
    ALIVE = 1


def wrap(coord, size):
    """ Map a coordinate that is at most one step outside [0, size)
    back onto the torus.
    """
    if coord < 0:
        return coord + size
    if coord >= size:
        return coord - size
    return coord


# Neighbor tables are shared by all grids of the same shape.
_neighbor_tables = dict()


class GameState:

    def __init__(self, cellules, cellules_width, cellules_height, active = True):
        self.cellules_width = cellules_width
        self.cellules_height = cellules_height
        self.active = active
        self._life_min = 2
        self._life_max = 3
        self._life_rev = 3
        self.cellules = list()
        self.set_cellules(cellules)
        self._neighbor_table = self._build_neighbor_table()


    @classmethod
    def from_seed(cls, seed, cellules_width, cellules_height):
        return cls(seed.cellules, cellules_width, cellules_height)


    @property
    def size(self):
        return self.cellules_width * self.cellules_height


    def set_cellules(self, cellules):
        cellules = [LifeState(c) for c in cellules]
        if len(cellules) != self.size:
            raise ValueError('Expected {} cellules for a {}x{} grid, got {}'.format(
                self.size, self.cellules_width, self.cellules_height, len(cellules)))
        self.cellules = cellules


    def reset(self):
        self.cellules = [LifeState.DEAD] * self.size


    def row_col_as_idx(self, row, col):
        row = wrap(row, self.cellules_height)
        col = wrap(col, self.cellules_width)
        return row * self.cellules_width + col


    def neighbor_indices(self, row, col):
        """ Flat indices of the 8 Moore neighbors of (row, col),
        with wrap-around at the edges.
        """
        return (
            self.row_col_as_idx(row - 1, col - 1),
            self.row_col_as_idx(row - 1, col),
            self.row_col_as_idx(row - 1, col + 1),
            self.row_col_as_idx(row, col - 1),
            self.row_col_as_idx(row, col + 1),
            self.row_col_as_idx(row + 1, col - 1),
            self.row_col_as_idx(row + 1, col),
            self.row_col_as_idx(row + 1, col + 1),
            )


    def neighbors(self, row, col):
        return [self.cellules[j] for j in self.neighbor_indices(row, col)]


    def _build_neighbor_table(self):
        shape = (self.cellules_height, self.cellules_width)
        if shape not in _neighbor_tables:
            _neighbor_tables[shape] = tuple(
                self.neighbor_indices(r, c)
                for r in range(self.cellules_height)
                for c in range(self.cellules_width))
        return _neighbor_tables[shape]


    def step(self):
        # Read phase: every count comes from the current generation.
        alive = [c == LifeState.ALIVE for c in self.cellules]
        to_dead = list()
        to_live = list()
        for idx, nbrs in enumerate(self._neighbor_table):
            cnt = sum(alive[j] for j in nbrs)
            if alive[idx]:
                if cnt < self._life_min or cnt > self._life_max:
                    to_dead.append(idx)
            elif cnt == self._life_rev:
                to_live.append(idx)
        # Write phase.
        for idx in to_dead:
            self.cellules[idx] = LifeState.DEAD
        for idx in to_live:
            self.cellules[idx] = LifeState.ALIVE


    def toggle_cellule(self, idx):
        if not 0 <= idx < len(self.cellules):
            raise IndexError('Cellule index {} out of range for {} cellules'.format(
                idx, len(self.cellules)))
        if self.cellules[idx] == LifeState.ALIVE:
            self.cellules[idx] = LifeState.DEAD
        else:
            self.cellules[idx] = LifeState.ALIVE


    def alive_count(self):
        return self.cellules.count(LifeState.ALIVE)


    def snapshot(self):
        return tuple(self.cellules)


    def to_board(self):
        arr = np.array(self.cellules, dtype=np.uint8)
        return arr.reshape((self.cellules_height, self.cellules_width))


def grids_are_identical(grid_a, grid_b):
    if len(grid_a) != len(grid_b):
        return False
    for a, b in zip(grid_a, grid_b):
        if a != b:
            return False
    return True
