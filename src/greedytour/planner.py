"""Greedy insertion heuristics.

Both planners are read-only scans over the current cycle.  They return
the handle of the node *after* which the new point should be spliced, or
``None`` when the sequence is empty and the point must be inserted as the
first node.  Ties go to the first candidate met in anchor order.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

from .errors import EmptySequenceEdgeError
from .models import Edge, NodeHandle, Point
from .sequence import CyclicSequence

logger = logging.getLogger(__name__)


def insertion_cost(a: Point, b: Point, point: Point) -> float:
    """Length added to a tour by splicing *point* into the edge a→b."""
    return a.distance_to(point) + point.distance_to(b) - a.distance_to(b)


def nearest_node(seq: CyclicSequence, point: Point) -> Tuple[NodeHandle, float]:
    """Return the node closest to *point* and its distance."""
    if len(seq) == 0:
        raise EmptySequenceEdgeError("Cannot search for a nearest node in an empty sequence")

    best: Optional[NodeHandle] = None
    best_distance = 0.0
    for edge in seq.iterate():
        d = point.distance_to(edge.start.point)
        if best is None or d < best_distance:
            best, best_distance = edge.start, d
    assert best is not None
    return best, best_distance


def cheapest_edge(seq: CyclicSequence, point: Point) -> Tuple[Edge, float]:
    """Return the edge whose insertion cost for *point* is smallest."""
    if len(seq) == 0:
        raise EmptySequenceEdgeError("Cannot search for a cheapest edge in an empty sequence")

    best: Optional[Edge] = None
    best_cost = 0.0
    for edge in seq.iterate():
        cost = insertion_cost(edge.start.point, edge.end.point, point)
        if best is None or cost < best_cost:
            best, best_cost = edge, cost
    assert best is not None
    return best, best_cost


def plan_nearest(seq: CyclicSequence, point: Point) -> Optional[NodeHandle]:
    """Nearest-neighbour insertion: place *point* right after its closest node."""
    if len(seq) == 0:
        return None
    node, distance = nearest_node(seq, point)
    logger.debug("plan_nearest: %s -> after %s (distance %.6g)", point, node.point, distance)
    return node


def plan_cheapest(seq: CyclicSequence, point: Point) -> Optional[NodeHandle]:
    """Cheapest insertion: place *point* in the edge with smallest length increase."""
    if len(seq) == 0:
        return None
    edge, cost = cheapest_edge(seq, point)
    logger.debug(
        "plan_cheapest: %s -> between %s and %s (increase %.6g)",
        point, edge.start.point, edge.end.point, cost,
    )
    return edge.start


Planner = Callable[[CyclicSequence, Point], Optional[NodeHandle]]

HEURISTICS: Dict[str, Planner] = {
    "nearest": plan_nearest,
    "smallest": plan_cheapest,
}


def get_planner(name: str) -> Planner:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        ) from None
