import unittest
import sys
import os
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# No window needed, drawing goes to off-screen surfaces
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from maze_walker.io.parser import MazeParser
from maze_walker.algo.enumerator import enumerate_paths
from maze_walker.algo.ranker import rank_paths
from maze_walker.viz.renderer import Renderer

SAMPLE = """
xxxxxx
0x000x
x*0x0x
xxxx00
00000x
xxxx0x
"""

class TestRenderer(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)
        self.grid = MazeParser.parse(SAMPLE)
        self.ranking = rank_paths(enumerate_paths(self.grid))

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def color_at(self, renderer, x, y):
        return tuple(renderer.surface.get_at((x, y)))[:3]

    def test_fit_to_screen(self):
        renderer = Renderer(self.grid, width=200, height=200)
        renderer.fit_to_screen()
        # (200 - 2 * 40) / 6 cells
        self.assertEqual(renderer.cell_size, 20.0)
        self.assertEqual(renderer.world_to_screen(0, 0), (40.0, 40.0))
        self.assertEqual(renderer.world_to_screen(5, 3), (140.0, 100.0))

    def test_draw_paths(self):
        renderer = Renderer(self.grid, ranking=self.ranking, width=200, height=200)
        renderer.surface = pygame.Surface((200, 200))
        renderer.fit_to_screen()
        renderer.draw_grid()

        # Centre of a blocked cell (0, 0)
        self.assertEqual(self.color_at(renderer, 50, 50), Renderer.COLOR_BLOCKED)
        # Exit of the shortest path (3, 5)
        self.assertEqual(self.color_at(renderer, 150, 110), Renderer.COLOR_SHORTEST)
        # Exit of the longest path (4, 0)
        self.assertEqual(self.color_at(renderer, 50, 130), Renderer.COLOR_LONGEST)
        # Start cell: shortest path on top, start colour at the edge
        self.assertEqual(self.color_at(renderer, 70, 90), Renderer.COLOR_SHORTEST)
        self.assertEqual(self.color_at(renderer, 61, 81), Renderer.COLOR_START)
        # Open cell off both paths (1, 0)
        self.assertEqual(self.color_at(renderer, 50, 70), Renderer.COLOR_OPEN)

    def test_draw_without_paths(self):
        renderer = Renderer(self.grid, width=200, height=200)
        renderer.surface = pygame.Surface((200, 200))
        renderer.fit_to_screen()
        renderer.draw_grid()
        self.assertEqual(self.color_at(renderer, 150, 110), Renderer.COLOR_OPEN)

    def test_save_snapshot(self):
        path = "test_out/maze.png"
        Renderer(self.grid, ranking=self.ranking, width=320, height=240).save_snapshot(path)
        self.assertTrue(os.path.exists(path))
        self.assertGreater(os.path.getsize(path), 0)

        image = pygame.image.load(path)
        self.assertEqual(image.get_size(), (320, 240))

if __name__ == '__main__':
    unittest.main()
