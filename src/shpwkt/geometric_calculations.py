from __future__ import annotations

from collections.abc import Iterable, Sequence

from .exceptions import MalformedPartIndex
from .types import BBox, PartsT, Point2D, PointsT


def bbox_from_points(points: Iterable[Point2D]) -> BBox:
    """Returns the (xmin, ymin, xmax, ymax) extent of a sequence of
    points. A single point collapses to a zero area box."""
    xs: list[float] = []
    ys: list[float] = []

    for point in points:
        xs.append(point[0])
        ys.append(point[1])

    return min(xs), min(ys), max(xs), max(ys)


def bbox_overlap(bbox1: BBox, bbox2: BBox) -> bool:
    """Tests whether two bounding boxes overlap."""
    xmin1, ymin1, xmax1, ymax1 = bbox1
    xmin2, ymin2, xmax2, ymax2 = bbox2
    overlap = xmin1 <= xmax2 and xmin2 <= xmax1 and ymin1 <= ymax2 and ymin2 <= ymax1
    return overlap


def split_parts(points: PointsT, parts: Sequence[int]) -> PartsT:
    """Splits a flat list of points into one list per part, where
    parts holds the index of the first point of each part. The end of
    the last part is the end of the points list.

    Part indexes must be non-decreasing and within [0, len(points)].
    """
    numPoints = len(points)
    previous = 0
    for i, start in enumerate(parts):
        if start < previous or start > numPoints:
            raise MalformedPartIndex(i, start, numPoints)
        previous = start

    bounds = list(parts) + [numPoints]
    return [list(points[bounds[i] : bounds[i + 1]]) for i in range(len(parts))]
