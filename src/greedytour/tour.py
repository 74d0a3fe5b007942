from __future__ import annotations

import json
from typing import Iterable, Iterator, List, Optional

from .models import Edge, NodeHandle, Point
from .planner import Planner, get_planner, plan_cheapest, plan_nearest
from .sequence import CyclicSequence


class Tour:
    """Closed tour grown one point at a time by greedy insertion.

    *points* seed the tour in the given cyclic order, e.g. the four
    corners of a starting quadrilateral.
    """

    VERSION = "1.0"

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self.sequence = CyclicSequence.from_points(points)

    @classmethod
    def square(cls, a: Point, b: Point, c: Point, d: Point) -> "Tour":
        """Four-point tour linked a → b → c → d → a."""
        return cls([a, b, c, d])

    # ── Insertion ───────────────────────────────────────────────────

    def insert_nearest(self, point: Point) -> NodeHandle:
        return self._insert(plan_nearest, point)

    def insert_smallest(self, point: Point) -> NodeHandle:
        return self._insert(plan_cheapest, point)

    def insert(self, point: Point, heuristic: str = "nearest") -> NodeHandle:
        return self._insert(get_planner(heuristic), point)

    def _insert(self, planner: Planner, point: Point) -> NodeHandle:
        # planners return None only for an empty tour, which insert_after seeds
        edge_start = planner(self.sequence, point)
        return self.sequence.insert_after(edge_start, point)

    # ── Queries ─────────────────────────────────────────────────────

    def size(self) -> int:
        return self.sequence.size()

    def __len__(self) -> int:
        return len(self.sequence)

    def total_length(self) -> float:
        return self.sequence.total_length()

    def anchor(self) -> Optional[NodeHandle]:
        return self.sequence.anchor()

    def iterate(self, start: Optional[NodeHandle] = None) -> Iterator[Edge]:
        return self.sequence.iterate(start)

    def points(self) -> List[Point]:
        return self.sequence.points()

    def show(self) -> List[str]:
        """One line per point, in tour order from the anchor."""
        return [str(point) for point in self.points()]

    # ── Serialization ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "version": self.VERSION,
            "points": [{"x": p.x, "y": p.y} for p in self.points()],
            "length": self.total_length(),
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "Tour":
        points = [Point(float(p["x"]), float(p["y"])) for p in payload.get("points", [])]
        return cls(points)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    @classmethod
    def from_json(cls, json_data: str) -> "Tour":
        return cls.from_dict(json.loads(json_data))

    def __repr__(self) -> str:
        return f"Tour(size={self.size()}, length={self.total_length():.6g})"
