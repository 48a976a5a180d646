import pathlib
import tempfile
import unittest

import matplotlib.pyplot as plt
from PIL import Image

from seedlife.game_state import LifeState
from seedlife.renderer import render_seed, render_seeds, seed_to_image, slugify
from seedlife.seeds import Seed, SeedCatalog, default_catalog


class TestRenderer(unittest.TestCase):

    def test_slugify(self):
        self.assertEqual(slugify('Forty Two'), 'forty-two')
        self.assertEqual(slugify('Mr Sir'), 'mr-sir')
        self.assertEqual(slugify('hmm'), 'hmm')

    def test_seed_to_image(self):
        img = seed_to_image(default_catalog().get('Glider'))
        self.assertEqual(img.shape, (400, 500, 3))
        # The glider's top cell is at row 2, column 3.
        self.assertEqual(img[20:30, 30:40].max(), 0)
        self.assertEqual(img[0:10, 0:10].min(), 255)
        self.assertEqual((img[:, :, 0] == 0).sum(), 5 * 100)

    def test_short_seed_draws_dead_and_warns(self):
        seed = Seed('Short', (LifeState.ALIVE,) * 1990)
        with self.assertLogs(level='WARNING') as logs:
            img = seed_to_image(seed)
        self.assertEqual(len(logs.output), 10)
        self.assertIn('index out of bounds 1990', logs.output[0])
        # Last row, last 10 cellules: dead.
        self.assertEqual(img[390:400, 400:500].min(), 255)
        self.assertEqual(img[390:400, 0:400].max(), 0)

    def test_long_seed_warns(self):
        seed = Seed('Long', (LifeState.DEAD,) * 2001)
        with self.assertLogs(level='WARNING'):
            img = seed_to_image(seed)
        self.assertEqual(img.min(), 255)

    def test_render_seed(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = render_seed(default_catalog().get('Forty Two'), tmp)
            self.assertEqual(path, pathlib.Path(tmp) / 'forty-two.png')
            img = plt.imread(str(path))
            self.assertEqual(img.shape, (400, 500, 3))
            with Image.open(path) as png:
                self.assertEqual(png.mode, 'RGB')
                self.assertEqual(png.size, (500, 400))
                self.assertEqual(png.getpixel((205, 175)), (0, 0, 0))
                self.assertEqual(png.getpixel((0, 0)), (255, 255, 255))

    def test_render_seeds(self):
        catalog = SeedCatalog([
            Seed('A b', (LifeState.DEAD,) * 2000),
            Seed('C', (LifeState.ALIVE,) * 2000)])
        with tempfile.TemporaryDirectory() as tmp:
            paths = render_seeds(catalog, pathlib.Path(tmp) / 'out')
            self.assertEqual([p.name for p in paths], ['a-b.png', 'c.png'])
            self.assertTrue(all(p.exists() for p in paths))


if __name__ == "__main__":
    unittest.main()
