class MazeError(ValueError):
    """Base class for every failure that ends a maze run."""


class MalformedMaze(MazeError):
    """Structural defect in the maze text (row widths, symbols, start count)."""


class NoStartFound(MazeError):
    pass


class EmptyPathSet(MazeError):
    """The search finished without reaching any exit."""


class SearchAborted(MazeError):
    """The search expanded more cells than its visit budget allows."""

    def __init__(self, visited: int, budget: int):
        super().__init__(f"Search aborted after {visited} visits (budget {budget})")
        self.visited = visited
        self.budget = budget


class TraceLimitExceeded(MazeError):
    """The grid is too large for the 16-bit coordinates of the search trace."""
