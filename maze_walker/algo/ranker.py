from typing import List, Sequence
from maze_walker.core.errors import EmptyPathSet
from maze_walker.algo.base import Path

class RankedPaths:
    """Paths ordered by ascending length. Ties keep their discovery order."""

    __slots__ = ('paths',)

    def __init__(self, paths: List[Path]):
        self.paths = paths

    @property
    def shortest(self) -> Path:
        return self.paths[0]

    @property
    def longest(self) -> Path:
        return self.paths[-1]

    @property
    def count(self) -> int:
        return len(self.paths)

def rank_paths(paths: Sequence[Path]) -> RankedPaths:
    if not paths:
        raise EmptyPathSet("No path leads out of the maze")
    # sorted() is stable
    return RankedPaths(sorted(paths, key=len))
