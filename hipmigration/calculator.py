"""
MigrationCalculator - Reimers migration percentage from eight landmarks

Every point is projected onto the Hilgenreiner direction (triradiate
point 0 to triradiate point 1), so the result does not depend on how the
radiograph is rotated in the image.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from hipmigration.errors import (
    DegenerateAxisError, DegenerateHeadWidthError, IncompleteInputError
)
from hipmigration.geometry import DEFAULT_EPSILON, axis_direction, project
from hipmigration.landmarks import LANDMARK_COUNT, SIDE_LANDMARKS, Landmark, Side

logger = logging.getLogger(__name__)


class InvalidReason(Enum):
    DEGENERATE_AXIS = "re-mark triradiate points"
    DEGENERATE_HEAD_WIDTH = "re-mark femoral head edges"


@dataclass(frozen=True)
class SideResult:
    side: Side
    percentage: Optional[float] = None      # clamped when clamping is enabled
    raw_percentage: Optional[float] = None  # always unclamped
    lateral_index: Optional[int] = None
    medial_index: Optional[int] = None
    error: Optional[InvalidReason] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    def format(self, decimals: int = 1) -> str:
        if not self.valid:
            return f"invalid ({self.error.value})"
        return f"{self.percentage:.{decimals}f}%"


@dataclass(frozen=True)
class MigrationResult:
    right: SideResult
    left: SideResult

    @property
    def valid(self) -> bool:
        return self.right.valid and self.left.valid

    def for_side(self, side: Side) -> SideResult:
        return self.right if side is Side.RIGHT else self.left

    def summary(self, decimals: int = 1) -> str:
        return (f"Right MP: {self.right.format(decimals)} | "
                f"Left MP: {self.left.format(decimals)}")


class MigrationCalculator:
    """Compute right and left migration percentages.

    Args:
        clamp: limit percentages to [0, 100]; the raw value stays on the result
        epsilon: below this length the axis or head width counts as degenerate
    """

    def __init__(self, clamp: bool = True, epsilon: float = DEFAULT_EPSILON):
        self.clamp = clamp
        self.epsilon = epsilon

    def compute(self, points: Sequence) -> MigrationResult:
        if len(points) != LANDMARK_COUNT:
            raise IncompleteInputError(len(points), LANDMARK_COUNT)

        try:
            u = axis_direction(points[Landmark.RIGHT_TRIRADIATE],
                               points[Landmark.LEFT_TRIRADIATE], self.epsilon)
        except DegenerateAxisError as e:
            logger.warning("%s", e)
            return MigrationResult(
                right=SideResult(Side.RIGHT, error=InvalidReason.DEGENERATE_AXIS),
                left=SideResult(Side.LEFT, error=InvalidReason.DEGENERATE_AXIS),
            )

        projected = [project(p, u) for p in points]
        center = (projected[Landmark.RIGHT_TRIRADIATE] +
                  projected[Landmark.LEFT_TRIRADIATE]) / 2

        result = MigrationResult(
            right=self._side(Side.RIGHT, projected, center),
            left=self._side(Side.LEFT, projected, center),
        )
        logger.info("Migration percentage: %s", result.summary())
        return result

    def _side(self, side, projected, center) -> SideResult:
        perkins_idx, (first_idx, second_idx) = SIDE_LANDMARKS[side]
        perkins = projected[perkins_idx]

        # On an exact tie the first edge index is lateral
        if abs(projected[first_idx] - center) >= abs(projected[second_idx] - center):
            lateral_idx, medial_idx = first_idx, second_idx
        else:
            lateral_idx, medial_idx = second_idx, first_idx
        lateral = projected[lateral_idx]
        medial = projected[medial_idx]

        try:
            raw = self.migration_percentage(lateral, medial, perkins, side.value)
        except DegenerateHeadWidthError as e:
            logger.warning("%s", e)
            return SideResult(side, lateral_index=int(lateral_idx),
                              medial_index=int(medial_idx),
                              error=InvalidReason.DEGENERATE_HEAD_WIDTH)

        percentage = min(max(raw, 0.0), 100.0) if self.clamp else raw
        return SideResult(side, percentage=percentage, raw_percentage=raw,
                          lateral_index=int(lateral_idx), medial_index=int(medial_idx))

    def migration_percentage(self, lateral, medial, perkins, side="") -> float:
        """|lateral - perkins| / |lateral - medial| * 100 on projected coordinates"""
        width = abs(lateral - medial)
        if width < self.epsilon:
            raise DegenerateHeadWidthError(side, width)
        return abs(lateral - perkins) / width * 100.0
