"""Tests for the migration percentage calculation"""

import numpy as np
import pytest

from hipmigration.calculator import InvalidReason, MigrationCalculator
from hipmigration.errors import DegenerateHeadWidthError, IncompleteInputError
from hipmigration.geometry import Point
from hipmigration.landmarks import Landmark, Side


def test_level_radiograph(horizontal_points):
    """Projection on a horizontal axis reproduces the textbook values"""
    result = MigrationCalculator().compute(horizontal_points)

    assert result.valid
    assert result.right.percentage == pytest.approx(40.0)
    assert result.left.percentage == pytest.approx(30.0)
    assert result.right.lateral_index == Landmark.RIGHT_HEAD_LATERAL
    assert result.right.medial_index == Landmark.RIGHT_HEAD_MEDIAL
    assert result.left.lateral_index == Landmark.LEFT_HEAD_LATERAL


def test_tilted_radiograph(horizontal_points, rotate):
    """A 30 degree tilt about the canvas centre keeps the right side at 40 %"""
    tilted = rotate(horizontal_points, 30.0, pivot=(400.0, 300.0))
    result = MigrationCalculator().compute(tilted)

    assert result.right.percentage == pytest.approx(40.0)
    assert result.left.percentage == pytest.approx(30.0)


@pytest.mark.parametrize("angle", [15.0, 90.0, 137.5, 180.0, 270.0, -42.0])
@pytest.mark.parametrize("pivot", [(0.0, 0.0), (400.0, 300.0), (-50.0, 1000.0)])
def test_rotation_invariance(horizontal_points, rotate, angle, pivot):
    """Rotating every point about any pivot leaves both percentages unchanged"""
    calculator = MigrationCalculator()
    reference = calculator.compute(horizontal_points)
    rotated = calculator.compute(rotate(horizontal_points, angle, pivot))

    assert rotated.right.percentage == pytest.approx(reference.right.percentage, abs=1e-9)
    assert rotated.left.percentage == pytest.approx(reference.left.percentage, abs=1e-9)
    assert rotated.right.lateral_index == reference.right.lateral_index
    assert rotated.left.lateral_index == reference.left.lateral_index


def test_lateral_edge_marked_second(horizontal_points):
    """Edges marked in swapped order are still told apart by distance from the midline"""
    points = list(horizontal_points)
    points[4], points[5] = points[5], points[4]
    result = MigrationCalculator().compute(points)

    assert result.right.lateral_index == Landmark.RIGHT_HEAD_MEDIAL
    assert result.right.percentage == pytest.approx(40.0)


def test_results_within_range():
    """Clamped percentages always lie in [0, 100]"""
    rng = np.random.default_rng(1234)
    calculator = MigrationCalculator()
    for _ in range(200):
        points = [Point(*xy) for xy in rng.uniform(0, 1000, size=(8, 2))]
        result = calculator.compute(points)
        for side in (result.right, result.left):
            if side.valid:
                assert 0.0 <= side.percentage <= 100.0
                assert np.isfinite(side.raw_percentage)


def test_idempotent(horizontal_points):
    """Computing twice on the same points gives identical results"""
    calculator = MigrationCalculator()
    assert calculator.compute(horizontal_points) == calculator.compute(horizontal_points)


def test_degenerate_axis(horizontal_points):
    """Coincident triradiate points invalidate both sides"""
    points = list(horizontal_points)
    points[1] = points[0]
    result = MigrationCalculator().compute(points)

    assert not result.valid
    for side in (result.right, result.left):
        assert side.error is InvalidReason.DEGENERATE_AXIS
        assert side.percentage is None
    assert "re-mark triradiate points" in result.summary()


def test_degenerate_head_width_one_side(horizontal_points):
    """A zero-width femoral head invalidates only its own side"""
    points = list(horizontal_points)
    # Same position along the axis, different height
    points[5] = Point(30.0, 90.0)
    result = MigrationCalculator().compute(points)

    assert result.right.error is InvalidReason.DEGENERATE_HEAD_WIDTH
    assert result.right.percentage is None
    assert result.left.valid
    assert result.left.percentage == pytest.approx(30.0)


def test_exact_tie_prefers_first_edge(horizontal_points):
    """With both edges equally far from the midline the first edge index is lateral"""
    points = list(horizontal_points)
    points[4] = Point(60.0, 130.0)   # 40 left of the midline at x=100
    points[5] = Point(140.0, 130.0)  # 40 right of the midline
    result = MigrationCalculator().compute(points)

    assert result.right.lateral_index == Landmark.RIGHT_HEAD_LATERAL
    assert result.right.medial_index == Landmark.RIGHT_HEAD_MEDIAL
    assert result.right.percentage == pytest.approx(12.5)


def test_clamping(horizontal_points):
    """Values above 100 are clamped by default and kept raw when clamping is off"""
    points = list(horizontal_points)
    points[2] = Point(100.0, 60.0)

    clamped = MigrationCalculator().compute(points)
    assert clamped.right.percentage == pytest.approx(100.0)
    assert clamped.right.raw_percentage == pytest.approx(140.0)

    raw = MigrationCalculator(clamp=False).compute(points)
    assert raw.right.percentage == pytest.approx(140.0)


def test_incomplete_input(horizontal_points):
    """Fewer than eight points is refused"""
    with pytest.raises(IncompleteInputError):
        MigrationCalculator().compute(horizontal_points[:7])


def test_migration_percentage_guard():
    """The raw formula refuses a zero head width"""
    calculator = MigrationCalculator()
    assert calculator.migration_percentage(30.0, 80.0, 50.0) == pytest.approx(40.0)
    with pytest.raises(DegenerateHeadWidthError):
        calculator.migration_percentage(30.0, 30.0, 50.0, "right")


def test_result_formatting(horizontal_points):
    """Summary text uses one decimal by default"""
    result = MigrationCalculator().compute(horizontal_points)

    assert result.summary() == "Right MP: 40.0% | Left MP: 30.0%"
    assert result.for_side(Side.LEFT).format(2) == "30.00%"
