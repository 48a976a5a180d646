# Conversion between cellules and their '0'/'1' string representation.

from seedlife.game_state import LifeState


def serialize_cellules(cellules):
    return ''.join('1' if c == LifeState.ALIVE else '0' for c in cellules)


def deserialize_cellules(cellules_string):
    """ One cellule per char. Only '1' is alive; any other char is dead.
    """
    return [LifeState.ALIVE if ch == '1' else LifeState.DEAD
            for ch in cellules_string]
