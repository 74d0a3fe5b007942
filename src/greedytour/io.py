from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .models import Point
from .tour import Tour


PathLike = Union[str, Path]


def load_json(path: PathLike) -> Tour:
    return Tour.from_json(Path(path).read_text(encoding="utf-8"))


def save_json(tour: Tour, path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tour.to_json(), encoding="utf-8")


def parse_points(text: str, skip_header: bool = False) -> List[Point]:
    """Parse whitespace-separated ``x y`` pairs.

    Blank lines and ``#`` comments are ignored.  With *skip_header* the
    first two numbers (a ``width height`` canvas header) are dropped.
    """
    values: List[float] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        for token in stripped.split():
            try:
                values.append(float(token))
            except ValueError:
                raise ValueError(f"Line {lineno}: {token!r} is not a number") from None

    if skip_header:
        values = values[2:]
    if len(values) % 2:
        raise ValueError(f"Expected x y pairs but found {len(values)} coordinates")
    return [Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def read_points(path: PathLike, skip_header: bool = False) -> List[Point]:
    return parse_points(Path(path).read_text(encoding="utf-8"), skip_header=skip_header)
