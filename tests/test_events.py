import unittest
import sys
import os
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.events import EventWriter, EventReader, EVT_EXPAND, EVT_EXIT, EVT_DEAD_END, MAGIC
from maze_walker.core.errors import TraceLimitExceeded, MazeError
from maze_walker.io.parser import MazeParser
from maze_walker.algo.enumerator import PathEnumerator

SAMPLE = """
xxxxxx
0x000x
x*0x0x
xxxx00
00000x
xxxx0x
"""

class TestEvents(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_search_trace(self):
        path = "test_out/search.events"
        grid = MazeParser.parse(SAMPLE)

        writer = EventWriter(path)
        enumerator = PathEnumerator(grid, event_writer=writer)
        enumerator.run_all()
        writer.close()

        reader = EventReader(path)
        self.assertEqual(reader.read_header(), (6, 6))
        events = list(reader.stream_events())
        reader.close()

        expands = [data for code, data in events if code == EVT_EXPAND]
        exits = [data for code, data in events if code == EVT_EXIT]
        dead_ends = [data for code, data in events if code == EVT_DEAD_END]

        self.assertEqual(len(expands), enumerator.visited_count)
        self.assertEqual(expands[0], (2, 1))
        self.assertEqual(exits, [(3, 5, 8), (4, 0, 12), (5, 4, 9)])
        self.assertEqual(len(dead_ends), enumerator.dead_ends)

    def test_dead_end_logged(self):
        path = "test_out/enclosed.events"
        writer = EventWriter(path)
        PathEnumerator(MazeParser.parse("xxx\nx*x\nxxx"), event_writer=writer).run_all()
        writer.close()

        reader = EventReader(path)
        reader.read_header()
        events = list(reader.stream_events())
        reader.close()

        self.assertEqual(events, [(EVT_EXPAND, (1, 1)), (EVT_DEAD_END, (1, 1))])

    def test_repeated_runs_share_one_header(self):
        path = "test_out/twice.events"
        grid = MazeParser.parse(SAMPLE)

        writer = EventWriter(path)
        enumerator = PathEnumerator(grid, event_writer=writer)
        enumerator.run_all()
        enumerator.run_all()
        writer.close()

        with open(path, "rb") as f:
            self.assertEqual(f.read().count(MAGIC), 1)

        reader = EventReader(path)
        self.assertEqual(reader.read_header(), (6, 6))
        exits = [data for code, data in reader.stream_events() if code == EVT_EXIT]
        reader.close()
        self.assertEqual(exits, [(3, 5, 8), (4, 0, 12), (5, 4, 9)] * 2)

    def test_header_size_mismatch(self):
        writer = EventWriter("test_out/mixed.events")
        writer.write_header(6, 6)
        with self.assertRaises(ValueError):
            writer.write_header(3, 3)
        writer.close()

    def test_grid_too_wide_for_trace(self):
        writer = EventWriter("test_out/wide.events")
        # Largest grid whose indices still fit
        writer.write_header(3, 65536)
        writer.close()

        writer = EventWriter("test_out/too_wide.events")
        with self.assertRaises(TraceLimitExceeded):
            writer.write_header(3, 66002)
        with self.assertRaises(MazeError):
            writer.write_header(65537, 3)
        writer.close()

    def test_bad_magic(self):
        path = "test_out/bogus.events"
        with open(path, "wb") as f:
            f.write(b"NOTALOG!" + b"\x00" * 8)

        reader = EventReader(path)
        with self.assertRaises(ValueError):
            reader.read_header()
        reader.close()

if __name__ == '__main__':
    unittest.main()
