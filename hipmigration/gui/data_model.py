"""
MeasurementDataModel - observable wrapper around a measurement session
"""

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from hipmigration.calculator import MigrationResult
from hipmigration.geometry import OverlayLine, Point
from hipmigration.session import MeasurementSession
from hipmigration.settings import MeasurementSettings


class MeasurementDataModel(QObject):
    """Central measurement data model with observer pattern"""

    points_changed = Signal(object)      # Ordered list of landmark points
    result_changed = Signal(object)      # MigrationResult or None
    instruction_changed = Signal(str)    # Next-step label changed

    def __init__(self, settings: Optional[MeasurementSettings] = None, parent=None):
        super().__init__(parent)
        self._session = MeasurementSession(settings)

    @property
    def session(self) -> MeasurementSession:
        return self._session

    @property
    def settings(self) -> MeasurementSettings:
        return self._session.settings

    def set_settings(self, settings: MeasurementSettings):
        """Start a fresh session with new settings"""
        self._session = MeasurementSession(settings)
        self._emit_all()

    # === Point data management ===

    def get_points(self) -> List[Point]:
        return self._session.points

    def get_result(self) -> Optional[MigrationResult]:
        return self._session.result

    def instruction(self) -> str:
        return self._session.next_step_label()

    def result_text(self) -> str:
        return self._session.result_text()

    def overlay_lines(self) -> List[OverlayLine]:
        return self._session.overlay_lines()

    def is_complete(self) -> bool:
        return self._session.is_complete()

    def hit_test(self, x: float, y: float, tolerance: float) -> Optional[int]:
        return self._session.hit_test(Point(x, y), tolerance)

    def add_point(self, x: float, y: float) -> bool:
        if not self._session.add_point(Point(x, y)):
            return False
        self._emit_all()
        return True

    def move_point(self, index: int, x: float, y: float) -> bool:
        previous = self._session.result
        if not self._session.move_point(index, Point(x, y)):
            return False
        self.points_changed.emit(self._session.points)
        if self._session.result != previous:
            self.result_changed.emit(self._session.result)
        return True

    def undo(self) -> bool:
        if self._session.undo() is None:
            return False
        self._emit_all()
        return True

    def reset(self):
        self._session.reset()
        self._emit_all()

    def _emit_all(self):
        self.points_changed.emit(self._session.points)
        self.result_changed.emit(self._session.result)
        self.instruction_changed.emit(self._session.next_step_label())
