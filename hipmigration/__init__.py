"""
Reimers migration percentage measurement on pelvic radiographs.
"""

from hipmigration.calculator import InvalidReason, MigrationCalculator, MigrationResult, SideResult
from hipmigration.geometry import LineKind, OverlayLine, Point
from hipmigration.landmarks import LANDMARK_COUNT, Landmark, Side
from hipmigration.point_store import PointStore
from hipmigration.session import MeasurementSession
from hipmigration.settings import MeasurementSettings, load_settings

__version__ = "1.0.0"

__all__ = [
    'InvalidReason',
    'LANDMARK_COUNT',
    'Landmark',
    'LineKind',
    'MeasurementSession',
    'MeasurementSettings',
    'MigrationCalculator',
    'MigrationResult',
    'OverlayLine',
    'Point',
    'PointStore',
    'Side',
    'SideResult',
    'load_settings',
]
