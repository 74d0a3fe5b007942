"""greedytour command-line interface."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .io import load_json, read_points, save_json
from .models import Point
from .planner import HEURISTICS
from .tour import Tour

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Greedy insertion tour builder")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a tour from a point file")
    build.add_argument("--in", dest="input_path", required=True)
    build.add_argument("--heuristic", choices=sorted(HEURISTICS), default="nearest")
    build.add_argument("--header", action="store_true",
                       help="Skip a leading 'width height' line")
    build.add_argument("--out", dest="output_path")
    build.add_argument("--render-out", dest="render_path")
    build.add_argument("--dpi", type=int, default=150)

    show = sub.add_parser("show", help="Print a saved tour")
    show.add_argument("--in", dest="input_path", required=True)

    render = sub.add_parser("render", help="Render a saved tour to PNG")
    render.add_argument("--in", dest="input_path", required=True)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--dpi", type=int, default=150)

    demo = sub.add_parser("demo", help="Build and print the four-point square tour")
    demo.add_argument("--render-out", dest="render_path")
    demo.add_argument("--dpi", type=int, default=150)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.command == "build":
        _cmd_build(args)

    elif args.command == "show":
        tour = load_json(args.input_path)
        _print_tour(tour)

    elif args.command == "render":
        from .render import render_png
        tour = load_json(args.input_path)
        render_png(tour, args.output_path, dpi=args.dpi)
        print(f"Saved {args.output_path}")

    elif args.command == "demo":
        _cmd_demo(args)


def _cmd_build(args) -> None:
    try:
        points = read_points(args.input_path, skip_header=args.header)
    except (OSError, ValueError) as exc:
        print(exc)
        raise SystemExit(1)

    tour = Tour()
    for point in points:
        tour.insert(point, heuristic=args.heuristic)
    logger.info("built %s tour over %d points", args.heuristic, tour.size())

    print(f"Tour size: {tour.size()}")
    print(f"Tour length: {tour.total_length():.4f}")
    if args.output_path:
        save_json(tour, args.output_path)
        print(f"Saved {args.output_path}")
    if args.render_path:
        from .render import render_png
        render_png(tour, args.render_path, dpi=args.dpi, title=f"{args.heuristic} insertion")
        print(f"Saved {args.render_path}")


def _cmd_demo(args) -> None:
    tour = Tour.square(
        Point(100.0, 100.0),
        Point(500.0, 100.0),
        Point(500.0, 500.0),
        Point(100.0, 500.0),
    )
    _print_tour(tour)
    if args.render_path:
        from .render import render_png
        render_png(tour, args.render_path, dpi=args.dpi)
        print(f"Saved {args.render_path}")


def _print_tour(tour: Tour) -> None:
    for line in tour.show():
        print(line)
    print(f"Tour size: {tour.size()}")
    print(f"Tour length: {tour.total_length():.4f}")


if __name__ == "__main__":
    main()
