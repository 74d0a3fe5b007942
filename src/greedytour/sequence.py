"""Cyclic sequence of points backing a tour.

Nodes live in an arena: ``_points[i]`` is the point held by node *i* and
``_next[i]`` the arena index of its successor.  The chain is a true cycle,
so every traversal terminates by counting steps, never by looking for a
missing successor.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator, List, Optional

from .errors import EmptySequenceEdgeError, InvalidHandleError
from .models import Edge, NodeHandle, Point

logger = logging.getLogger(__name__)

_owner_ids = itertools.count(1)


class CyclicSequence:
    """Ordered, grow-only cycle of points.

    The only mutation is :meth:`insert_after`.  The anchor is the first
    node ever inserted and is the default start of every traversal.
    """

    def __init__(self) -> None:
        self._id = next(_owner_ids)
        self._points: List[Point] = []
        self._next: List[int] = []

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "CyclicSequence":
        """Build a sequence visiting *points* in the given order."""
        seq = cls()
        last: Optional[NodeHandle] = None
        for point in points:
            last = seq.insert_after(last, point)
        return seq

    # ── Queries ─────────────────────────────────────────────────────

    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def anchor(self) -> Optional[NodeHandle]:
        """Return the first node ever inserted, or ``None`` when empty."""
        if not self._points:
            return None
        return self._handle(0)

    def point(self, handle: NodeHandle) -> Point:
        return self._points[self._resolve(handle)]

    def next(self, handle: NodeHandle) -> NodeHandle:
        """Return the successor of *handle* in traversal order."""
        return self._handle(self._next[self._resolve(handle)])

    def total_length(self) -> float:
        """Sum of edge lengths over one full revolution (0 for size < 2)."""
        return sum(edge.length for edge in self.iterate())

    # ── Traversal ───────────────────────────────────────────────────

    def iterate(self, start: Optional[NodeHandle] = None) -> Iterator[Edge]:
        """Yield exactly ``size()`` edges, one revolution from *start*.

        *start* defaults to the anchor.  Each call restarts the traversal.
        """
        if not self._points:
            return iter(())
        index = 0 if start is None else self._resolve(start)
        return self._walk(index, len(self._points))

    def _walk(self, index: int, steps: int) -> Iterator[Edge]:
        current = self._handle(index)
        for _ in range(steps):
            following = self._handle(self._next[current.index])
            yield Edge(current, following)
            current = following

    def handles(self, start: Optional[NodeHandle] = None) -> List[NodeHandle]:
        return [edge.start for edge in self.iterate(start)]

    def points(self, start: Optional[NodeHandle] = None) -> List[Point]:
        return [edge.start.point for edge in self.iterate(start)]

    # ── Mutation ────────────────────────────────────────────────────

    def insert_after(self, edge_start: Optional[NodeHandle], point: Point) -> NodeHandle:
        """Splice *point* in between *edge_start* and its successor.

        On an empty sequence *edge_start* must be ``None``: the point
        becomes a single self-looped node and the anchor.
        """
        index = len(self._points)
        if not self._points:
            if edge_start is not None:
                raise EmptySequenceEdgeError(
                    "Cannot insert after a node of an empty sequence; insert as first node"
                )
            self._points.append(point)
            self._next.append(index)
            logger.debug("seeded sequence %d with %s", self._id, point)
            return self._handle(index)

        if edge_start is None:
            raise InvalidHandleError(
                f"Sequence {self._id} is not empty; an edge start handle is required"
            )
        before = self._resolve(edge_start)
        self._points.append(point)
        self._next.append(self._next[before])
        self._next[before] = index
        logger.debug(
            "inserted %s after node %d of sequence %d (size %d)",
            point, before, self._id, len(self._points),
        )
        return self._handle(index)

    # ── Handle helpers ──────────────────────────────────────────────

    def _handle(self, index: int) -> NodeHandle:
        return NodeHandle(self._id, index, self._points[index])

    def _resolve(self, handle: NodeHandle) -> int:
        if not isinstance(handle, NodeHandle):
            raise InvalidHandleError(f"Expected a NodeHandle, got {type(handle).__name__}")
        if handle.owner != self._id:
            raise InvalidHandleError(
                f"Handle belongs to sequence {handle.owner}, not sequence {self._id}"
            )
        if not 0 <= handle.index < len(self._points):
            raise InvalidHandleError(
                f"Handle index {handle.index} out of range for sequence {self._id}"
            )
        return handle.index

    def __repr__(self) -> str:
        return f"CyclicSequence(id={self._id}, size={len(self._points)})"
