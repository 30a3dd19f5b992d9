import math

import pytest

from gridpath.point import Point
from gridpath.walker import Walker

LONG_PATH = [Point(x, 0) for x in range(8)]
SHORT_PATH = [Point(0, 0), Point(1, 0), Point(1, 1)]


def test_walker_repr():
    w = Walker()
    w.x, w.y = 1.2345, 2.3456
    r = repr(w)
    assert "x=1.23" in r and "y=2.35" in r


def test_spawn_requires_path():
    w = Walker()
    assert not w.spawn()
    w.set_path([Point(0, 0)])
    assert not w.spawn()
    assert not w.active


def test_spawn_places_on_start_facing_next():
    w = Walker()
    w.set_path(SHORT_PATH)
    assert w.spawn()
    assert (w.x, w.y) == (0.0, 0.0)
    assert math.isclose(w.angle, 0.0)
    assert w.active and not w.moving


def test_waits_for_start_delay():
    w = Walker(move_speed=1.0, start_delay=0.5, min_tiles_to_run=2)
    w.set_path(LONG_PATH)
    w.spawn()
    w.update(0.25)
    assert (w.x, w.y) == (0.0, 0.0)
    w.update(0.25)
    assert w.moving
    w.update(0.5)
    assert pytest.approx(w.x, rel=1e-6) == 0.5


def test_runs_long_paths_and_walks_short_ones():
    runner = Walker(move_speed=2.0, start_delay=0.0, min_tiles_to_run=6)
    runner.set_path(LONG_PATH)
    assert runner.running
    runner.spawn()
    runner.update(0.0)
    runner.update(1.0)
    assert pytest.approx(runner.x, rel=1e-6) == 2.0

    walker = Walker(move_speed=2.0, start_delay=0.0, min_tiles_to_run=6)
    walker.set_path(SHORT_PATH)
    assert not walker.running
    walker.spawn()
    walker.update(0.0)
    walker.update(1.0)
    # Walking speed is a quarter of running speed
    assert pytest.approx(walker.x, rel=1e-6) == 0.5


def test_follows_corners_and_stops_at_goal():
    w = Walker(move_speed=1.0, start_delay=0.0, min_tiles_to_run=10)
    w.set_path(SHORT_PATH)
    w.spawn()
    for _ in range(100):
        w.update(0.1)
    assert (w.x, w.y) == (1.0, 1.0)
    assert not w.moving
    assert w.finished
    assert math.isclose(w.angle, math.pi / 2)


def test_stop_freezes_walker():
    w = Walker(move_speed=1.0, start_delay=0.0)
    w.set_path(LONG_PATH)
    w.spawn()
    w.stop()
    w.update(1.0)
    assert not w.active
    assert (w.x, w.y) == (0.0, 0.0)
