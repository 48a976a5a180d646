# Draw seeds as PNG images: one block of pixels per cellule.

import logging
import pathlib
import re

import matplotlib.colors
import numpy as np
from PIL import Image

from seedlife import config
from seedlife.game_state import LifeState


def color_to_pixel(color):
    return tuple(round(255 * v) for v in matplotlib.colors.to_rgb(color))


LIVE_PIXEL = color_to_pixel('black')
DEAD_PIXEL = color_to_pixel('white')


def slugify(label):
    """ 'Forty Two' -> 'forty-two'. """
    return '-'.join(re.findall(r'[a-z0-9]+', label.lower()))


def seed_to_image(seed, ncols = config.CELLULES_WIDTH, nrows = config.CELLULES_HEIGHT,
                  block = config.PIXELS_PER_CELLULE):
    """ Return a (nrows*block, ncols*block, 3) uint8 array, black where alive.
    """
    size = ncols * nrows
    cellules = seed.cellules
    if len(cellules) > size:
        logging.warning('Seed {} has {} cellules; only the first {} are drawn.'.format(
            seed.label, len(cellules), size))
    board = np.zeros(size, dtype=bool)
    for idx in range(size):
        if idx < len(cellules):
            board[idx] = cellules[idx] == LifeState.ALIVE
        else:
            logging.warning('Seed {}: index out of bounds {}'.format(seed.label, idx))
    board = board.reshape((nrows, ncols))
    # Scale each cellule up to a block x block square.
    pixels = np.kron(board, np.ones((block, block), dtype=bool))
    img = np.empty(pixels.shape + (3,), dtype=np.uint8)
    img[pixels] = LIVE_PIXEL
    img[~pixels] = DEAD_PIXEL
    return img


def render_seed(seed, output_dir = None):
    output_dir = pathlib.Path(output_dir or config.output_root)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / (slugify(seed.label) + '.png')
    # A uint8 (h, w, 3) array is saved as 8-bit RGB, no alpha channel.
    Image.fromarray(seed_to_image(seed)).save(output_path)
    logging.info('Rendered seed {} to {}'.format(seed.label, output_path))
    return output_path


def render_seeds(catalog, output_dir = None):
    return [render_seed(seed, output_dir) for seed in catalog]
