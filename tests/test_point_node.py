from gridpath.node import Node
from gridpath.point import Point


def test_point_value_semantics():
    assert Point(2, 3) == Point(2, 3)
    assert Point(2, 3) != Point(3, 2)
    assert {Point(1, 1), Point(1, 1)} == {Point(1, 1)}
    assert Point(2, 3).equals(2, 3)
    assert not Point(2, 3).equals(3, 2)


def test_point_unset():
    assert Point.UNSET.is_unset()
    assert Point(-1, 4).is_unset()
    assert Point(4, -1).is_unset()
    assert not Point(0, 0).is_unset()


def test_point_manhattan():
    assert Point(1, 1).manhattan(Point(4, -3)) == 7


def test_node_costs_and_priority():
    a = Node(True, 0, 0)
    b = Node(True, 1, 0)
    a.g_cost, a.h_cost = 1, 2
    b.g_cost, b.h_cost = 2, 2
    assert a.f_cost == 3
    assert a.has_priority_over(b)
    assert not b.has_priority_over(a)
    # Equal f and h: neither outranks the other
    b.g_cost = 1
    assert not a.has_priority_over(b)
    assert not b.has_priority_over(a)


def test_node_reset_search_state():
    parent = Node(True, 0, 0)
    node = Node(False, 1, 0)
    node.g_cost, node.h_cost, node.parent, node.heap_index = 4, 5, parent, 2
    node.reset_search_state()
    assert (node.g_cost, node.h_cost, node.parent, node.heap_index) == (0, 0, None, -1)
    # Traversability and coordinates are not search state
    assert node.traversable is False
    assert node.point == Point(1, 0)
