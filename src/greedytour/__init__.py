"""greedytour — incremental TSP tours by greedy insertion.

Public API is organised into layers:

- **Core** — models, cyclic sequence, insertion planners, tour facade
- **I/O** — JSON tours and point files
- **Rendering** — PNG output (requires matplotlib)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import Point, NodeHandle, Edge
from .errors import TourError, EmptySequenceEdgeError, InvalidHandleError
from .sequence import CyclicSequence
from .planner import (
    HEURISTICS,
    insertion_cost,
    nearest_node,
    cheapest_edge,
    plan_nearest,
    plan_cheapest,
    get_planner,
)
from .tour import Tour

# ── I/O ─────────────────────────────────────────────────────────────
from .io import load_json, save_json, parse_points, read_points

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import render_png

__all__ = [
    # Core
    "Point",
    "NodeHandle",
    "Edge",
    "TourError",
    "EmptySequenceEdgeError",
    "InvalidHandleError",
    "CyclicSequence",
    "HEURISTICS",
    "insertion_cost",
    "nearest_node",
    "cheapest_edge",
    "plan_nearest",
    "plan_cheapest",
    "get_planner",
    "Tour",
    # I/O
    "load_json",
    "save_json",
    "parse_points",
    "read_points",
    # Rendering
    "render_png",
]
