from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class NodeHandle:
    """Opaque reference to one node of a :class:`CyclicSequence`.

    *owner* identifies the issuing sequence and *index* the node's slot in
    its arena.  Nodes are never removed, so a handle stays valid for the
    lifetime of its sequence.
    """

    owner: int
    index: int
    point: Point


@dataclass(frozen=True)
class Edge:
    """Ordered adjacent pair ``(node, node.next)`` of a tour."""

    start: NodeHandle
    end: NodeHandle

    @property
    def length(self) -> float:
        return self.start.point.distance_to(self.end.point)
