"""Shared fixtures for the measurement tests"""

import math

import pytest

from hipmigration.geometry import Point


@pytest.fixture
def horizontal_points():
    """Eight landmarks on a level radiograph: right side 40 %, left side 30 %"""
    return [
        Point(0.0, 100.0),    # right triradiate
        Point(200.0, 100.0),  # left triradiate
        Point(50.0, 60.0),    # right Perkins
        Point(160.0, 60.0),   # left Perkins
        Point(30.0, 130.0),   # right head lateral
        Point(80.0, 130.0),   # right head medial
        Point(175.0, 130.0),  # left head lateral
        Point(125.0, 130.0),  # left head medial
    ]


@pytest.fixture
def rotate():
    """Return a function rotating points by an angle in degrees about a pivot"""
    def _rotate(points, angle_deg, pivot=(0.0, 0.0)):
        theta = math.radians(angle_deg)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        px, py = pivot
        rotated = []
        for x, y in points:
            dx, dy = x - px, y - py
            rotated.append(Point(px + dx * cos_t - dy * sin_t,
                                 py + dx * sin_t + dy * cos_t))
        return rotated
    return _rotate
