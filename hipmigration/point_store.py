"""
PointStore - ordered storage for the landmark points of one measurement
"""

import logging
from typing import List, Optional

from hipmigration.geometry import Point, as_point, distance
from hipmigration.landmarks import LANDMARK_COUNT

logger = logging.getLogger(__name__)


class PointStore:
    """Ordered landmark points; index i always holds role i"""

    def __init__(self, capacity: int = LANDMARK_COUNT):
        self.capacity = capacity
        self._points: List[Point] = []

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(list(self._points))

    def __getitem__(self, index) -> Point:
        return self._points[index]

    # === Point data management ===

    def get_points(self) -> List[Point]:
        """Get a copy of the ordered points"""
        return list(self._points)

    def add(self, point) -> bool:
        """Append the next landmark; rejected when the store is full"""
        if len(self._points) >= self.capacity:
            logger.warning("Rejected point %s: all %d landmarks already marked",
                           tuple(point), self.capacity)
            return False
        self._points.append(as_point(point))
        logger.debug("Added landmark %d at %s", len(self._points) - 1, self._points[-1])
        return True

    def move_at(self, index: int, point) -> bool:
        """Replace the coordinates of an existing point"""
        if not 0 <= index < len(self._points):
            logger.debug("Ignored move of missing landmark %d", index)
            return False
        self._points[index] = as_point(point)
        return True

    def move_last(self, point) -> bool:
        return self.move_at(len(self._points) - 1, point)

    def undo(self) -> Optional[Point]:
        """Remove and return the last point, or None if empty"""
        if not self._points:
            return None
        removed = self._points.pop()
        logger.debug("Removed landmark %d", len(self._points))
        return removed

    def reset(self):
        """Clear all points"""
        if self._points:
            logger.debug("Cleared %d landmarks", len(self._points))
        self._points = []

    def is_complete(self) -> bool:
        return len(self._points) == self.capacity

    # === Hit testing ===

    def find_point_at(self, query, tolerance: float) -> Optional[int]:
        """Index of the nearest point within ``tolerance`` of ``query``.

        ``tolerance`` is in image-space units; callers convert a screen
        radius with ``hit_tolerance(radius, scale)``. Ties go to the lower
        index.
        """
        best_index = None
        best_distance = None
        for index, point in enumerate(self._points):
            d = distance(point, query)
            if d <= tolerance and (best_distance is None or d < best_distance):
                best_index = index
                best_distance = d
        return best_index
