"""
MeasurementSession - one measurement on one radiograph

Owns the point store, the calculator and the last computed result.
Front ends create a session per image and call reset() or discard it
when a new image is loaded.
"""

import logging
from typing import List, Optional

from hipmigration.calculator import MigrationCalculator, MigrationResult
from hipmigration.geometry import OverlayLine, Point, build_overlay_lines
from hipmigration.landmarks import next_step_label
from hipmigration.point_store import PointStore
from hipmigration.settings import MeasurementSettings

logger = logging.getLogger(__name__)


class MeasurementSession:
    """Point collection plus the migration result derived from it"""

    def __init__(self, settings: Optional[MeasurementSettings] = None):
        self.settings = settings or MeasurementSettings()
        self.store = PointStore()
        self.calculator = MigrationCalculator(clamp=self.settings.clamp,
                                              epsilon=self.settings.epsilon)
        self._result: Optional[MigrationResult] = None

    @property
    def points(self) -> List[Point]:
        return self.store.get_points()

    @property
    def result(self) -> Optional[MigrationResult]:
        """Last computed result, None while fewer than eight points exist"""
        return self._result

    def is_complete(self) -> bool:
        return self.store.is_complete()

    def add_point(self, point) -> bool:
        """Append the next landmark, computing the result once all are marked"""
        if not self.store.add(point):
            return False
        if self.store.is_complete():
            self._recompute()
        return True

    def move_point(self, index: int, point) -> bool:
        """Drag an existing landmark to a new position"""
        if not self.store.move_at(index, point):
            return False
        if self.store.is_complete():
            self._recompute()
        return True

    def undo(self) -> Optional[Point]:
        removed = self.store.undo()
        if removed is not None:
            self._result = None
        return removed

    def reset(self):
        self.store.reset()
        self._result = None
        logger.debug("Session reset")

    def hit_test(self, point, tolerance: float) -> Optional[int]:
        return self.store.find_point_at(point, tolerance)

    def next_step_label(self) -> str:
        return next_step_label(len(self.store), self.settings.labels, self.settings.prompts)

    def overlay_lines(self) -> List[OverlayLine]:
        return build_overlay_lines(self.store.get_points(),
                                   extent=self.settings.line_extent,
                                   epsilon=self.settings.epsilon)

    def result_text(self) -> str:
        if self._result is None:
            return ""
        return self._result.summary(self.settings.decimals)

    def _recompute(self):
        self._result = self.calculator.compute(self.store.get_points())
