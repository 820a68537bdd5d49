from maze_walker.core.grid import Grid

# Above this many walkable cells the exhaustive search gets slow
LARGE_MAZE_CELLS = 400

class MazeStats:
    @staticmethod
    def calculate(grid: Grid):
        open_cells = 0
        blocked_cells = 0
        exit_cells = 0
        dead_ends = 0

        def walkable(val):
            return val == Grid.OPEN or val == Grid.START

        for row in range(grid.rows):
            for col in range(grid.cols):
                val = grid.cells[row * grid.cols + col]
                if not walkable(val):
                    blocked_cells += 1
                    continue

                open_cells += 1
                if grid.is_exit(row, col):
                    exit_cells += 1
                    continue
                if val == Grid.START:
                    continue

                # Interior cell with a single way in (or none) is a dead end
                degree = 0
                for nr, nc in grid.get_neighbors(row, col):
                    if walkable(grid.cells[nr * grid.cols + nc]):
                        degree += 1
                if degree <= 1:
                    dead_ends += 1

        total = grid.rows * grid.cols
        return {
            "open_cells": open_cells,
            "blocked_cells": blocked_cells,
            "exit_cells": exit_cells,
            "dead_ends": dead_ends,
            "open_percent": (open_cells / total) * 100
        }
