from typing import Iterator, List, Optional
from maze_walker.core.grid import Grid
from maze_walker.core.errors import SearchAborted
from maze_walker.algo.base import PathSearch, Coordinate, Path

class PathEnumerator(PathSearch):
    """
    Exhaustive depth-first search for every simple path from the start to
    the grid boundary.

    Each frame owns a grid snapshot. Expanding a frame derives one new
    snapshot with the current cell marked VISITED, which its children share
    read-only; a child marks its own copy when it is expanded in turn.
    Children are pushed in reverse direction order so paths come out in
    RIGHT, UP, LEFT, DOWN order, the same order a recursive walk would give.
    """

    def __init__(self, grid: Grid, event_writer=None, max_visits: Optional[int] = None):
        super().__init__(grid, event_writer)
        self.max_visits = max_visits
        self.dead_ends = 0

    def run(self, start: Coordinate) -> Iterator[str]:
        self.paths = []
        self.visited_count = 0
        self.dead_ends = 0

        if self.event_writer:
            self.event_writer.write_header(self.grid.rows, self.grid.cols)

        # Stack of (row, col, snapshot, steps before this cell)
        stack = [(start[0], start[1], self.grid, ())]

        while stack:
            row, col, snapshot, steps = stack.pop()

            self.visited_count += 1
            if self.max_visits is not None and self.visited_count > self.max_visits:
                raise SearchAborted(self.visited_count, self.max_visits)

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count} Paths: {len(self.paths)} Stack: {len(stack)}"

            if self.event_writer:
                self.event_writer.log_expand(row, col)

            path = steps + ((row, col),)

            if snapshot.is_exit(row, col):
                self.paths.append(path)
                if self.event_writer:
                    self.event_writer.log_exit(row, col, len(path))
                continue

            moves = list(snapshot.legal_moves(row, col))
            if not moves:
                self.dead_ends += 1
                if self.event_writer:
                    self.event_writer.log_dead_end(row, col)
                continue

            marked = snapshot.with_cell(row, col, Grid.VISITED)
            for nr, nc, _ in reversed(moves):
                stack.append((nr, nc, marked, path))

        yield "Done"

def enumerate_paths(grid: Grid, start: Coordinate = None, max_visits: Optional[int] = None) -> List[Path]:
    return PathEnumerator(grid, max_visits=max_visits).run_all(start)
