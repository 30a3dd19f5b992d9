import pytest

from gridpath import config
from gridpath.grid import Grid
from gridpath.path_info import PathInfo, PathResult, message, solve
from gridpath.pathfinding import Pathfinder
from gridpath.point import Point


def solve_on(grid):
    return solve(Pathfinder(grid.width, grid.height), grid)


@pytest.mark.parametrize(
    "start,goal,expected",
    [
        (Point.UNSET, Point.UNSET, PathInfo.NO_START_NO_GOAL),
        (Point.UNSET, Point(1, 1), PathInfo.NO_START),
        (Point(0, 0), Point.UNSET, PathInfo.NO_GOAL),
    ],
)
def test_missing_endpoints(start, goal, expected):
    grid = Grid(3, 3)
    grid.start, grid.goal = start, goal
    result = solve_on(grid)
    assert result.info is expected
    assert not result.found
    assert result.length == 0
    assert result.positions() == []


def test_goal_boxed_in_is_no_valid_path():
    grid = Grid(4, 4)
    for p in (Point(1, 2), Point(3, 2), Point(2, 1), Point(2, 3)):
        grid.node_at(p).traversable = False
    grid.start, grid.goal = Point(0, 0), Point(2, 2)
    result = solve_on(grid)
    assert result.info is PathInfo.NO_VALID_PATH
    assert result.message() == config.INFO_NO_VALID_PATH_TEXT


def test_valid_path_positions_include_start():
    grid = Grid(3, 3)
    grid.start, grid.goal = Point(0, 0), Point(2, 2)
    result = solve_on(grid)
    assert result.found
    assert result.length == 4
    positions = result.positions()
    assert positions[0] == Point(0, 0)
    assert positions[1:] == result.path
    assert "4" in result.message()


def test_message_for_every_outcome():
    for info in PathInfo:
        assert message(info, 3)


def test_default_result_has_no_path():
    result = PathResult(PathInfo.NO_START_NO_GOAL)
    assert result.start.is_unset()
    assert result.path == []
