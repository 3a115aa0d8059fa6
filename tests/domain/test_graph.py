# tests/domain/test_graph.py
import pytest

from pathgraph.domain.entities.geography import Position
from pathgraph.domain.errors import (
    DuplicatePoint,
    InvalidPosition,
    InvalidWeightScale,
    PointNotFound,
    SelfConnection,
)
from pathgraph.domain.graph import Graph
from pathgraph.domain.search.search_hooks import NoopHooks


@pytest.fixture
def triangle() -> Graph:
    g = Graph()
    g.add_point("a", position=(0, 0))
    g.add_point("b", position=(1, 0))
    g.add_point("c", position=(0, 1))
    return g


def _edges(g: Graph) -> set[tuple]:
    return {(p, q) for p in g.get_points() for q in g.get_point_connections(p)}


# ---------- points


def test_coordinate_ids_double_as_positions():
    g = Graph()
    g.add_point((1, 2))
    g.add_point(Position(3.0, 4.0, 5.0))
    g.add_point((1, 2, 3))
    assert g.get_point_position((1, 2)) == Position(1.0, 2.0, 0.0)
    assert g.get_point_position(Position(3.0, 4.0, 5.0)) == Position(3.0, 4.0, 5.0)
    assert g.get_point_position((1, 2, 3)) == Position(1.0, 2.0, 3.0)


def test_opaque_ids_need_a_position():
    g = Graph()
    with pytest.raises(InvalidPosition):
        g.add_point(7)
    with pytest.raises(InvalidPosition):
        g.add_point("x", position=("a", "b"))
    assert len(g) == 0
    g.add_point(7, position=(0.5, 0.5))
    assert g.get_point_position(7) == Position(0.5, 0.5)


def test_add_point_errors_leave_graph_unchanged(triangle: Graph):
    with pytest.raises(DuplicatePoint):
        triangle.add_point("a", position=(5, 5))
    with pytest.raises(InvalidWeightScale):
        triangle.add_point("d", 0.0, position=(5, 5))
    with pytest.raises(InvalidWeightScale):
        triangle.add_point("d", -2.0, position=(5, 5))
    assert triangle.get_points() == ["a", "b", "c"]
    assert triangle.get_point_position("a") == Position(0.0, 0.0)


def test_duplicate_opaque_id_is_reported_before_position(triangle: Graph):
    with pytest.raises(DuplicatePoint):
        triangle.add_point("a")
    with pytest.raises(DuplicatePoint):
        triangle.add_point("a", position="nowhere")
    assert triangle.get_point_position("a") == Position(0.0, 0.0)


def test_weight_scale_get_set(triangle: Graph):
    assert triangle.get_weight_scale("a") == 1.0
    triangle.set_weight_scale("a", 4.0)
    assert triangle.get_weight_scale("a") == 4.0
    assert triangle.waypoint("a").weight_scale == 4.0
    with pytest.raises(InvalidWeightScale):
        triangle.set_weight_scale("a", 0)
    assert triangle.get_weight_scale("a") == 4.0
    with pytest.raises(PointNotFound):
        triangle.get_weight_scale("zz")
    with pytest.raises(PointNotFound):
        triangle.set_weight_scale("zz", 2.0)


def test_set_point_position(triangle: Graph):
    triangle.set_point_position("a", (9, 9, 9))
    assert triangle.get_point_position("a") == Position(9.0, 9.0, 9.0)
    with pytest.raises(InvalidPosition):
        triangle.set_point_position("a", "nowhere")
    with pytest.raises(PointNotFound):
        triangle.set_point_position("zz", (0, 0))


def test_add_then_remove_restores_connectivity(triangle: Graph):
    triangle.connect_points("a", "b")
    triangle.connect_points("b", "c", bidirectional=False)
    before = _edges(triangle)

    triangle.add_point("d", position=(3, 3))
    triangle.connect_points("d", "a")
    triangle.connect_points("b", "d", bidirectional=False)
    triangle.remove_point("d")

    assert _edges(triangle) == before
    assert not triangle.has_point("d")


def test_remove_point_leaves_no_dangling_neighbours(triangle: Graph):
    triangle.connect_points("a", "b")
    triangle.connect_points("c", "b", bidirectional=False)
    triangle.remove_point("b")
    assert triangle.get_point_connections("a") == []
    assert triangle.get_point_connections("c") == []
    with pytest.raises(PointNotFound):
        triangle.remove_point("b")


def test_clear_never_fails():
    g = Graph()
    g.clear()
    g.add_point((0, 0))
    g.add_point((1, 0))
    g.connect_points((0, 0), (1, 0))
    g.clear()
    assert len(g) == 0
    g.add_point((0, 0))
    assert g.get_point_connections((0, 0)) == []


# ---------- edges


def test_bidirectional_connect_is_visible_both_ways(triangle: Graph):
    triangle.connect_points("a", "b")
    assert triangle.are_points_connected("a", "b")
    assert triangle.are_points_connected("b", "a")
    assert triangle.get_point_connections("a") == ["b"]
    assert triangle.get_point_connections("b") == ["a"]


def test_one_way_connect_is_reported_both_ways_but_stored_once(triangle: Graph):
    triangle.connect_points("a", "b", bidirectional=False)
    assert triangle.are_points_connected("a", "b")
    assert triangle.are_points_connected("b", "a")
    assert triangle.get_point_connections("a") == ["b"]
    assert triangle.get_point_connections("b") == []


def test_disconnect_removes_both_directions(triangle: Graph):
    triangle.connect_points("a", "b", bidirectional=False)
    triangle.disconnect_points("a", "b")
    assert not triangle.are_points_connected("a", "b")
    assert not triangle.are_points_connected("b", "a")

    triangle.connect_points("b", "a", bidirectional=False)
    triangle.disconnect_points("a", "b")
    assert not triangle.are_points_connected("b", "a")


def test_disconnect_of_unconnected_points_is_a_noop(triangle: Graph):
    triangle.disconnect_points("a", "c")
    assert _edges(triangle) == set()


def test_repeated_connect_keeps_one_edge(triangle: Graph):
    triangle.connect_points("a", "b")
    triangle.connect_points("a", "b")
    triangle.connect_points("b", "a", bidirectional=False)
    assert triangle.get_point_connections("a") == ["b"]
    assert triangle.get_point_connections("b") == ["a"]


def test_edge_errors(triangle: Graph):
    with pytest.raises(SelfConnection):
        triangle.connect_points("a", "a")
    with pytest.raises(PointNotFound):
        triangle.connect_points("a", "zz")
    with pytest.raises(PointNotFound):
        triangle.connect_points("zz", "a")
    with pytest.raises(PointNotFound):
        triangle.disconnect_points("a", "zz")
    with pytest.raises(PointNotFound):
        triangle.are_points_connected("zz", "a")
    assert _edges(triangle) == set()


# ---------- spatial


def test_closest_point_prefers_nearest_then_lowest_id():
    g = Graph()
    assert g.get_closest_point((0, 0)) is None
    g.add_point("b", position=(1, 0))
    g.add_point("a", position=(-1, 0))
    g.add_point("c", position=(0, 5))
    assert g.get_closest_point((0.9, 0.2)) == "b"
    assert g.get_closest_point((0, 0)) == "a"  # tie between a and b
    assert g.get_closest_point((0, 4, 0)) == "c"
    with pytest.raises(InvalidPosition):
        g.get_closest_point("here")


# ---------- hooks


class RecordingHooks(NoopHooks):
    def __init__(self):
        self.mutations, self.errors = [], []

    def mutation(self, op, **kw):
        self.mutations.append(op)

    def error(self, op, *, exc, **kw):
        self.errors.append((op, type(exc).__name__))


def test_hooks_see_mutations_and_errors():
    hooks = RecordingHooks()
    g = Graph(hooks=hooks)
    g.add_point((0, 0))
    g.add_point((1, 0))
    g.connect_points((0, 0), (1, 0))
    with pytest.raises(SelfConnection):
        g.connect_points((0, 0), (0, 0))
    g.disconnect_points((0, 0), (1, 0))
    g.clear()
    assert hooks.mutations == [
        "add_point",
        "add_point",
        "connect_points",
        "disconnect_points",
        "clear",
    ]
    assert hooks.errors == [("connect_points", "SelfConnection")]
