from array import array
from typing import Iterator, Tuple

from maze_walker.core.errors import NoStartFound

class Grid:
    # Cell States
    BLOCKED = 0
    OPEN    = 1
    START   = 2
    VISITED = 3

    # Directions, in exploration order
    RIGHT = 0
    UP    = 1
    LEFT  = 2
    DOWN  = 3
    DIRECTIONS = (RIGHT, UP, LEFT, DOWN)

    # Direction Helpers (row, col deltas)
    DR = {RIGHT: 0, UP: -1, LEFT: 0, DOWN: 1}
    DC = {RIGHT: 1, UP: 0, LEFT: -1, DOWN: 0}
    NAMES = {RIGHT: "right", UP: "up", LEFT: "left", DOWN: "down"}

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int, cells: array = None):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid must be non-empty, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # 'B' (unsigned char) -> 1 byte per cell, row-major
        if cells is None:
            cells = array('B', [self.BLOCKED] * (rows * cols))
        elif len(cells) != rows * cols:
            raise ValueError(f"Expected {rows * cols} cells, got {len(cells)}")
        self.cells = cells

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get(self, row: int, col: int) -> int:
        return self.cells[self.get_index(row, col)]

    def with_cell(self, row: int, col: int, value: int) -> "Grid":
        """
        Returns a copy of this grid with one cell replaced.
        The receiver is never modified, so sibling search branches can
        share it safely.
        """
        idx = self.get_index(row, col)
        cells = array('B', self.cells)
        cells[idx] = value
        return Grid(self.rows, self.cols, cells)

    def locate_start(self) -> Tuple[int, int]:
        # Row-major scan, first START wins
        try:
            idx = self.cells.index(self.START)
        except ValueError:
            raise NoStartFound("No start marker in grid") from None
        return divmod(idx, self.cols)

    def is_exit(self, row: int, col: int) -> bool:
        # Any boundary cell counts as leaving the maze
        return (row == 0 or row == self.rows - 1 or
                col == 0 or col == self.cols - 1)

    def can_move(self, row: int, col: int, direction: int) -> bool:
        """
        True if stepping from (row, col) in 'direction' stays inside the grid
        and lands on an OPEN cell. START and VISITED cells are not targets.
        """
        nr = row + self.DR[direction]
        nc = col + self.DC[direction]
        if not (0 <= nr < self.rows and 0 <= nc < self.cols):
            return False
        return self.cells[nr * self.cols + nc] == self.OPEN

    def legal_moves(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nr, nc, direction) for each legal step, in RIGHT, UP, LEFT, DOWN order.
        """
        for direction in self.DIRECTIONS:
            if self.can_move(row, col, direction):
                yield (row + self.DR[direction], col + self.DC[direction], direction)

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nr, nc) for all in-bounds orthogonal neighbours.
        Does NOT check cell states.
        """
        for direction in self.DIRECTIONS:
            nr, nc = row + self.DR[direction], col + self.DC[direction]
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                yield (nr, nc)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self.cells == other.cells

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols})"
