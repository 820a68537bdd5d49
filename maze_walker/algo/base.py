from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple
from maze_walker.core.grid import Grid

Coordinate = Tuple[int, int]
Path = Tuple[Coordinate, ...]

class PathSearch(ABC):
    def __init__(self, grid: Grid, event_writer=None):
        self.grid = grid
        self.paths: List[Path] = []
        self.visited_count = 0
        self.event_writer = event_writer

    @abstractmethod
    def run(self, start: Coordinate) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        Completed paths are collected in self.paths.
        """
        pass

    def run_all(self, start: Coordinate = None) -> List[Path]:
        """Helper to run the search to completion."""
        if start is None:
            start = self.grid.locate_start()
        for _ in self.run(start):
            pass
        return self.paths
