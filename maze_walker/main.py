import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_walker' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.core.errors import MazeError

DEFAULT_MAZE_FILE = "maze.txt"

logger = logging.getLogger("maze_walker")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser():
    parser = argparse.ArgumentParser(description="Maze Walker: enumerate every way out of a grid maze")
    parser.add_argument("maze_file", nargs="?", default=DEFAULT_MAZE_FILE, help=f"Path to maze text file (default: {DEFAULT_MAZE_FILE})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--json", type=str, help="Write the report as JSON to this file")
    parser.add_argument("--compress", action="store_true", help="zlib-compress the JSON report")
    parser.add_argument("--trace", type=str, help="Save search events to binary file")
    parser.add_argument("--max-visits", type=int, default=None, help="Abort the search after this many cell visits")
    parser.add_argument("--visual", action="store_true", help="Show the maze with shortest and longest paths")
    parser.add_argument("--snapshot", type=str, help="Save an image of the maze with its paths")
    return parser

def print_report(report):
    print(f"The maze has {report.path_count} paths.")
    print(f"The shortest path in the maze is: {report.shortest.length} steps long.")
    print(f"The path is {report.shortest.steps}")
    print(f"The longest path in the maze is: {report.longest.length} steps long.")
    print(f"The path is {report.longest.steps}")

def walk(args):
    from maze_walker.io.parser import MazeParser
    from maze_walker.core.complexity import MazeStats, LARGE_MAZE_CELLS
    from maze_walker.core.events import EventWriter
    from maze_walker.algo.enumerator import PathEnumerator
    from maze_walker.algo.ranker import rank_paths
    from maze_walker.io.report import MazeReport, ReportSerializer

    logger.info(f"Loading {args.maze_file}...")
    grid = MazeParser.load(args.maze_file)
    start = grid.locate_start()
    logger.info(f"Loaded {grid.rows}x{grid.cols} maze. Start: {start}")

    stats = MazeStats.calculate(grid)
    logger.debug(f"Stats: {stats}")
    if stats["open_cells"] > LARGE_MAZE_CELLS:
        logger.warning(f"{stats['open_cells']} open cells: exhaustive search may take a long time")

    evt_writer = None
    if args.trace:
        evt_writer = EventWriter(args.trace)
        logger.info(f"Recording events to {args.trace}...")

    enumerator = PathEnumerator(grid, event_writer=evt_writer, max_visits=args.max_visits)
    try:
        for status in enumerator.run(start):
            logger.debug(status)
    finally:
        if evt_writer:
            evt_writer.close()

    logger.info(f"Search done. Visited: {enumerator.visited_count} Dead ends: {enumerator.dead_ends}")

    ranking = rank_paths(enumerator.paths)
    report = MazeReport.from_ranking(grid, start, ranking)
    print_report(report)

    if args.json:
        logger.info(f"Saving report to {args.json}...")
        ReportSerializer.save(report, args.json, compress=args.compress)

    if args.snapshot:
        from maze_walker.viz.renderer import Renderer
        logger.info(f"Saving snapshot to {args.snapshot}...")
        Renderer(grid, ranking=ranking).save_snapshot(args.snapshot)

    if args.visual:
        logger.info("Visual mode enabled - Opening window...")
        from maze_walker.viz.renderer import Renderer
        renderer = Renderer(grid, ranking=ranking)
        renderer.init_window()
        renderer.run_loop()

    return report

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        walk(args)
    except MazeError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
