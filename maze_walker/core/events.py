import struct
from typing import Iterator, Tuple

from maze_walker.core.errors import TraceLimitExceeded

# Event Types
EVT_EXPAND = 0x01
EVT_EXIT = 0x02
EVT_DEAD_END = 0x03

MAGIC = b"MAZEWALK"

# Coordinates are packed as unsigned shorts
MAX_DIMENSION = 0xFFFF + 1

class EventWriter:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")
        self.header = None

    def write_header(self, rows: int, cols: int):
        """
        Writes the log header once. Later calls for the same grid size are
        ignored so several searches can share one log.
        """
        if rows > MAX_DIMENSION or cols > MAX_DIMENSION:
            raise TraceLimitExceeded(
                f"Cannot trace a {rows}x{cols} grid, at most {MAX_DIMENSION} rows and columns")
        if self.header is not None:
            if self.header != (rows, cols):
                raise ValueError(f"Log already holds a {self.header[0]}x{self.header[1]} grid")
            return
        self.header = (rows, cols)

        # Header: Magic "MAZEWALK" + Rows (4b) + Cols (4b)
        self.file.write(MAGIC)
        self.file.write(struct.pack(">II", rows, cols))

    def log_expand(self, row: int, col: int):
        # 1 byte type + 2b Row + 2b Col
        self.file.write(struct.pack(">BHH", EVT_EXPAND, row, col))

    def log_exit(self, row: int, col: int, length: int):
        # 1 byte type + 2b Row + 2b Col + 4b Path length
        self.file.write(struct.pack(">BHHI", EVT_EXIT, row, col, length))

    def log_dead_end(self, row: int, col: int):
        self.file.write(struct.pack(">BHH", EVT_DEAD_END, row, col))

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.rows = 0
        self.cols = 0

    def read_header(self) -> Tuple[int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        data = self.file.read(8)
        self.rows, self.cols = struct.unpack(">II", data)
        return self.rows, self.cols

    def stream_events(self) -> Iterator[Tuple[int, Tuple]]:
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = ord(type_byte)

            if type_code == EVT_EXPAND:
                data = self.file.read(4) # 2 shorts
                yield (type_code, struct.unpack(">HH", data))

            elif type_code == EVT_EXIT:
                data = self.file.read(8) # 2 shorts + 1 int
                yield (type_code, struct.unpack(">HHI", data))

            elif type_code == EVT_DEAD_END:
                data = self.file.read(4)
                yield (type_code, struct.unpack(">HH", data))

            else:
                raise ValueError(f"Unknown event type 0x{type_code:02x}")

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
