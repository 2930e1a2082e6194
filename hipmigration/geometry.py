"""
Geometry helpers for the migration measurement.

All coordinates are image-space: screen positions are divided by the
current display scale before they reach these functions.
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from hipmigration.errors import DegenerateAxisError
from hipmigration.landmarks import LANDMARK_COUNT, Landmark

DEFAULT_EPSILON = 1e-6
DEFAULT_LINE_EXTENT = 10000.0


class Point(NamedTuple):
    x: float
    y: float


class LineKind(Enum):
    HILGENREINER = "hilgenreiner"
    PERKINS = "perkins"
    FEMORAL_HEAD = "femoral_head"


class OverlayLine(NamedTuple):
    kind: LineKind
    start: Point
    end: Point
    landmark: Optional[int]  # point the line passes through, None for the axis


def as_point(value) -> Point:
    """Coerce an (x, y) pair into a Point of floats"""
    x, y = value
    return Point(float(x), float(y))


def screen_to_image(screen_x, screen_y, scale) -> Point:
    """Convert a screen coordinate to image space by dividing by the display scale"""
    if scale <= 0:
        raise ValueError(f"Display scale must be positive, got {scale}")
    return Point(screen_x / scale, screen_y / scale)


def hit_tolerance(radius, scale) -> float:
    """Screen-pixel pick radius expressed in image-space units"""
    if scale <= 0:
        raise ValueError(f"Display scale must be positive, got {scale}")
    return radius / scale


def distance(p, q) -> float:
    return float(np.hypot(p[0] - q[0], p[1] - q[1]))


def axis_direction(p0, p1, epsilon=DEFAULT_EPSILON) -> np.ndarray:
    """Unit vector from p0 to p1 (the Hilgenreiner direction).

    Raises:
        DegenerateAxisError: if the points are closer than ``epsilon``
    """
    v = np.asarray(p1, dtype=float) - np.asarray(p0, dtype=float)
    norm = float(np.linalg.norm(v))
    if norm < epsilon:
        raise DegenerateAxisError(norm)
    return v / norm


def project(point, direction) -> float:
    """Scalar projection of a point onto a unit direction"""
    return float(np.dot(np.asarray(point, dtype=float), direction))


def perpendicular(direction) -> np.ndarray:
    """Direction rotated by 90 degrees: (-dy, dx)"""
    return np.array([-direction[1], direction[0]], dtype=float)


def _line_through(point, direction, extent) -> Tuple[Point, Point]:
    p = np.asarray(point, dtype=float)
    start = p - extent * direction
    end = p + extent * direction
    return Point(float(start[0]), float(start[1])), Point(float(end[0]), float(end[1]))


def build_overlay_lines(points: Sequence, extent=DEFAULT_LINE_EXTENT,
                        epsilon=DEFAULT_EPSILON) -> List[OverlayLine]:
    """Construction lines for the marked points.

    The Hilgenreiner line appears once both triradiate points exist, the
    two Perkins lines once both acetabular edges exist, and the four
    femoral head lines once all points are marked. Returns an empty list
    while the axis is undefined.
    """
    if len(points) < 2:
        return []
    try:
        u = axis_direction(points[0], points[1], epsilon)
    except DegenerateAxisError:
        return []

    lines = []
    start, end = _line_through(points[0], u, extent)
    lines.append(OverlayLine(LineKind.HILGENREINER, start, end, None))

    perp = perpendicular(u)
    if len(points) > Landmark.LEFT_PERKINS:
        for idx in (Landmark.RIGHT_PERKINS, Landmark.LEFT_PERKINS):
            start, end = _line_through(points[idx], perp, extent)
            lines.append(OverlayLine(LineKind.PERKINS, start, end, int(idx)))

    if len(points) >= LANDMARK_COUNT:
        for idx in range(Landmark.RIGHT_HEAD_LATERAL, LANDMARK_COUNT):
            start, end = _line_through(points[idx], perp, extent)
            lines.append(OverlayLine(LineKind.FEMORAL_HEAD, start, end, idx))

    return lines
