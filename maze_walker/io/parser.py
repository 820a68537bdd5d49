from array import array
from maze_walker.core.grid import Grid
from maze_walker.core.errors import MalformedMaze

class MazeParser:
    """
    Reads the text maze format:

        xxxxxx
        0x000x
        x*0x0x

    'x' is blocked, '0' is open and '*' marks the single start cell.
    Surrounding whitespace of the whole text is ignored.
    """
    SYMBOLS = {
        "x": Grid.BLOCKED,
        "0": Grid.OPEN,
        "*": Grid.START,
    }

    @staticmethod
    def parse(text: str) -> Grid:
        lines = text.strip().splitlines()
        if not lines:
            raise MalformedMaze("Maze text is empty")

        cols = len(lines[0])
        cells = array('B')
        starts = 0

        for row, line in enumerate(lines):
            if len(line) != cols:
                raise MalformedMaze(
                    f"Row {row} has {len(line)} cells, expected {cols}")
            for col, ch in enumerate(line):
                value = MazeParser.SYMBOLS.get(ch)
                if value is None:
                    raise MalformedMaze(
                        f"Unrecognized symbol {ch!r} at row {row}, column {col}")
                if value == Grid.START:
                    starts += 1
                cells.append(value)

        if starts != 1:
            raise MalformedMaze(f"Expected exactly one start marker '*', found {starts}")

        return Grid(len(lines), cols, cells)

    @staticmethod
    def load(filepath: str) -> Grid:
        with open(filepath, "r", encoding="utf-8") as f:
            return MazeParser.parse(f.read())
