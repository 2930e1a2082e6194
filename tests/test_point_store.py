"""Tests for the landmark point store"""

from hipmigration.geometry import Point
from hipmigration.point_store import PointStore


def test_add_until_complete(horizontal_points):
    """Eight adds complete the store and a ninth is rejected"""
    store = PointStore()
    for i, point in enumerate(horizontal_points):
        assert not store.is_complete()
        assert store.add(point) is True
        assert len(store) == i + 1
    assert store.is_complete()

    assert store.add(Point(1.0, 2.0)) is False
    assert len(store) == 8
    assert store.get_points() == horizontal_points


def test_add_then_undo_restores(horizontal_points):
    """add followed by undo leaves the exact previous sequence"""
    store = PointStore()
    for point in horizontal_points[:3]:
        store.add(point)
    before = store.get_points()

    store.add(Point(12.5, 99.25))
    assert store.undo() == Point(12.5, 99.25)
    assert store.get_points() == before


def test_undo_empty():
    """Undo on an empty store is a no-op"""
    store = PointStore()
    assert store.undo() is None
    assert len(store) == 0


def test_move(horizontal_points):
    """Moving keeps order and count and rejects missing indices"""
    store = PointStore()
    for point in horizontal_points[:4]:
        store.add(point)

    assert store.move_at(1, (210, 95)) is True
    assert store[1] == Point(210.0, 95.0)
    assert store.move_last(Point(165.0, 58.0)) is True
    assert store[3] == Point(165.0, 58.0)
    assert len(store) == 4

    assert store.move_at(4, Point(0.0, 0.0)) is False
    assert store.move_at(-1, Point(0.0, 0.0)) is False
    assert len(store) == 4


def test_move_last_on_empty():
    """move_last has nothing to move on an empty store"""
    assert PointStore().move_last(Point(1.0, 1.0)) is False


def test_reset(horizontal_points):
    """Reset clears every point"""
    store = PointStore()
    for point in horizontal_points:
        store.add(point)
    store.reset()
    assert len(store) == 0
    assert not store.is_complete()
    assert store.add(Point(0.0, 0.0)) is True


def test_points_are_copies(horizontal_points):
    """Mutating the returned list does not touch the store"""
    store = PointStore()
    store.add(horizontal_points[0])
    points = store.get_points()
    points.append(Point(5.0, 5.0))
    assert len(store) == 1


def test_find_point_at():
    """Hit-testing returns the nearest point inside the tolerance"""
    store = PointStore()
    store.add(Point(100.0, 100.0))
    store.add(Point(106.0, 100.0))
    store.add(Point(300.0, 300.0))

    assert store.find_point_at(Point(104.0, 100.0), 5.0) == 1
    assert store.find_point_at(Point(101.0, 100.0), 5.0) == 0
    assert store.find_point_at(Point(300.0, 304.0), 4.0) == 2
    assert store.find_point_at(Point(200.0, 200.0), 5.0) is None
    assert PointStore().find_point_at(Point(0.0, 0.0), 100.0) is None


def test_find_point_at_tie_prefers_lower_index():
    """Equidistant points resolve to the earlier landmark"""
    store = PointStore()
    store.add(Point(0.0, 0.0))
    store.add(Point(10.0, 0.0))
    assert store.find_point_at(Point(5.0, 0.0), 5.0) == 0
