from __future__ import annotations

from pathlib import Path

from .tour import Tour


def render_png(
    tour: Tour,
    output_path: str | Path,
    edge_color: str = "#2b2b2b",
    point_color: str = "#d1495b",
    anchor_color: str = "#5aa9e6",
    point_size: float = 12.0,
    padding: float = 0.05,
    dpi: int = 150,
    title: str | None = None,
) -> None:
    """Render a tour to PNG, drawing every edge of the cycle.

    Requires matplotlib; imported lazily to keep core package lightweight.
    *padding* is a fraction of the larger bounding-box side.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    if tour.size() == 0:
        raise ValueError("Cannot render an empty tour.")

    fig, ax = plt.subplots()

    for edge in tour.iterate():
        a, b = edge.start.point, edge.end.point
        ax.plot([a.x, b.x], [a.y, b.y], color=edge_color, linewidth=1.0)

    points = tour.points()
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    ax.scatter(xs, ys, s=point_size, c=point_color, zorder=3)
    ax.scatter(xs[:1], ys[:1], s=point_size * 2, c=anchor_color, zorder=4)

    span = max(max(xs) - min(xs), max(ys) - min(ys)) or 1.0
    pad = span * padding
    ax.set_aspect("equal", "box")
    ax.set_xlim(min(xs) - pad, max(xs) + pad)
    ax.set_ylim(min(ys) - pad, max(ys) + pad)
    ax.axis("off")
    if title:
        ax.set_title(title)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
