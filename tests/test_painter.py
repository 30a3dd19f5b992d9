from gridpath.grid import Grid
from gridpath.painter import GridPainter, PlacingMode
from gridpath.point import Point


def make_painter(w=4, h=4):
    grid = Grid(w, h)
    painter = GridPainter(grid)
    changes = []
    painter.on_change(lambda g: changes.append(g))
    return grid, painter, changes


def test_stroke_paints_obstacles_only():
    grid, painter, changes = make_painter()
    grid.node_at(Point(1, 0)).traversable = False
    # First cell is open, so the whole stroke paints obstacles
    assert painter.apply(Point(0, 0))
    assert not painter.apply(Point(1, 0))
    assert painter.apply(Point(2, 0))
    assert not grid.is_traversable(Point(0, 0))
    assert not grid.is_traversable(Point(1, 0))
    assert not grid.is_traversable(Point(2, 0))
    assert len(changes) == 2


def test_stroke_clears_after_end_stroke():
    grid, painter, _ = make_painter()
    painter.apply(Point(0, 0))
    painter.end_stroke()
    # New stroke starting on an obstacle clears cells
    assert painter.apply(Point(0, 0))
    assert grid.is_traversable(Point(0, 0))
    assert not painter.apply(Point(1, 0))
    assert grid.is_traversable(Point(1, 0))


def test_obstacles_never_painted_on_endpoints():
    grid, painter, changes = make_painter()
    grid.start = Point(0, 0)
    assert not painter.toggle_obstacle(Point(0, 0))
    assert grid.is_traversable(Point(0, 0))
    assert changes == []


def test_place_start_and_goal():
    grid, painter, changes = make_painter()
    painter.set_mode(PlacingMode.START)
    assert painter.apply(Point(1, 1))
    painter.set_mode(PlacingMode.GOAL)
    assert painter.apply(Point(3, 3))
    assert grid.start == Point(1, 1)
    assert grid.goal == Point(3, 3)
    assert len(changes) == 2


def test_place_rejects_obstacles_and_other_endpoint():
    grid, painter, changes = make_painter()
    grid.node_at(Point(2, 2)).traversable = False
    assert not painter.place_start(Point(2, 2))
    painter.place_start(Point(0, 0))
    assert not painter.place_goal(Point(0, 0))
    # Re-placing start where it already is changes nothing
    assert not painter.place_start(Point(0, 0))
    assert grid.goal.is_unset()
    assert len(changes) == 1


def test_apply_out_of_bounds_is_ignored():
    _, painter, changes = make_painter()
    assert not painter.apply(Point(9, 9))
    assert not painter.apply(Point.UNSET)
    assert changes == []


def test_invert_skips_endpoints():
    grid, painter, changes = make_painter(3, 1)
    grid.start = Point(0, 0)
    grid.node_at(Point(2, 0)).traversable = False
    painter.invert()
    assert grid.is_traversable(Point(0, 0))
    assert not grid.is_traversable(Point(1, 0))
    assert grid.is_traversable(Point(2, 0))
    assert len(changes) == 1
