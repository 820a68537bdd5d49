import json
import zlib
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Tuple
from maze_walker.core.grid import Grid
from maze_walker.algo.ranker import RankedPaths

@dataclass
class PathSummary:
    length: int
    steps: List[Tuple[int, int]]

    @classmethod
    def from_path(cls, path) -> "PathSummary":
        return cls(length=len(path), steps=[tuple(step) for step in path])

@dataclass
class MazeReport:
    rows: int
    cols: int
    start: Tuple[int, int]
    path_count: int
    shortest: PathSummary
    longest: PathSummary

    @classmethod
    def from_ranking(cls, grid: Grid, start: Tuple[int, int], ranking: RankedPaths) -> "MazeReport":
        return cls(
            rows=grid.rows,
            cols=grid.cols,
            start=tuple(start),
            path_count=ranking.count,
            shortest=PathSummary.from_path(ranking.shortest),
            longest=PathSummary.from_path(ranking.longest),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # JSON has no tuples; keep coordinates as [row, col] pairs
        data["start"] = list(self.start)
        for key in ("shortest", "longest"):
            data[key]["steps"] = [list(step) for step in data[key]["steps"]]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MazeReport":
        def summary(d):
            return PathSummary(length=d["length"], steps=[tuple(s) for s in d["steps"]])

        return cls(
            rows=data["rows"],
            cols=data["cols"],
            start=tuple(data["start"]),
            path_count=data["path_count"],
            shortest=summary(data["shortest"]),
            longest=summary(data["longest"]),
        )

class ReportSerializer:
    @staticmethod
    def save(report: MazeReport, filepath: str, compress=False):
        """
        Writes the report as JSON. With compress=True the JSON bytes are
        zlib-compressed.
        """
        data = json.dumps(report.to_dict(), indent=None if compress else 2).encode('utf-8')
        if compress:
            data = zlib.compress(data)

        with open(filepath, "wb") as f:
            f.write(data)

    @staticmethod
    def load(filepath: str) -> MazeReport:
        with open(filepath, "rb") as f:
            data = f.read()

        # zlib streams start with 0x78, JSON with '{'
        if data[:1] != b"{":
            data = zlib.decompress(data)

        return MazeReport.from_dict(json.loads(data.decode('utf-8')))
