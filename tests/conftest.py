# tests/conftest.py
from typing import Dict, Iterator, Tuple

import pytest

from aoc_search.config import CONFIG

Coord = Tuple[int, int]

HEIGHTMAP_SAMPLE = [
    "Sabqponm",
    "abcryxxl",
    "accszExk",
    "acctuvwj",
    "abdefghi",
]


class Heightmap:
    """Small elevation grid used as an external caller of the search."""

    def __init__(self, rows) -> None:
        self.heights: Dict[Coord, int] = {}
        self.start: Coord = (0, 0)
        self.goal: Coord = (0, 0)
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch == "S":
                    self.start = (r, c)
                    ch = "a"
                elif ch == "E":
                    self.goal = (r, c)
                    ch = "z"
                self.heights[(r, c)] = ord(ch) - ord("a")

    @property
    def positions(self):
        return list(self.heights)

    def _adjacent(self, pos: Coord) -> Iterator[Coord]:
        r, c = pos
        for n in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if n in self.heights:
                yield n

    def climb(self, pos: Coord) -> Iterator[Coord]:
        """Neighbours at most one step higher."""
        return (n for n in self._adjacent(pos) if self.heights[n] <= self.heights[pos] + 1)

    def descend(self, pos: Coord) -> Iterator[Coord]:
        """Neighbours at most one step lower (reverse of :meth:`climb`)."""
        return (n for n in self._adjacent(pos) if self.heights[n] >= self.heights[pos] - 1)

    def manhattan_to_goal(self, pos: Coord) -> int:
        return abs(pos[0] - self.goal[0]) + abs(pos[1] - self.goal[1])


@pytest.fixture
def heightmap() -> Heightmap:
    return Heightmap(HEIGHTMAP_SAMPLE)


@pytest.fixture(autouse=True)
def heap_invariant_checks(monkeypatch):
    """Run every heap built during the tests with the assertion sweep on."""
    monkeypatch.setattr(CONFIG.heap, "check_invariants", True)
