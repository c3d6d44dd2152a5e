# tests/domain/test_graph.py
import math

import pytest

from road_router.domain.entities.geography import Edge, InvalidEdgeError, Node, Point
from road_router.domain.graph import RoadGraph


def _two_points():
    g = RoadGraph()
    a, b = Point(0.0, 0.0), Point(0.0, 1.0)
    g.add_vertex(a)
    g.add_vertex(b)
    return g, a, b


# ---------- Point


def test_point_equality_and_hash_by_value():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


def test_point_distance_is_great_circle_km():
    a, b = Point(0.0, 0.0), Point(0.0, 1.0)
    # one degree of longitude on the equator
    assert abs(a.distance(b) - 111.195) < 0.01
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


# ---------- Vertices


def test_sample_network_counts(simple_graph):
    assert simple_graph.vertex_count() == 9
    assert simple_graph.edge_count() == 22


def test_add_vertex_ignores_duplicates_and_none():
    g = RoadGraph()
    assert g.add_vertex(Point(1.0, 1.0)) is True
    assert g.add_vertex(Point(1.0, 1.0)) is False
    assert g.add_vertex(None) is False
    assert g.vertex_count() == 1
    assert Point(1.0, 1.0) in g


def test_vertices_is_a_snapshot(simple_graph):
    vs = simple_graph.vertices()
    vs.clear()
    assert simple_graph.vertex_count() == 9
    assert Point(4.0, 1.0) in simple_graph.vertices()


# ---------- Edges


def test_add_edge_is_directed_and_counts_by_one():
    g, a, b = _two_points()
    before = g.edge_count()
    e = g.add_edge(a, b, "Main street", "residential", 1.5)
    assert g.edge_count() == before + 1
    assert e.start.point == a and e.end.point == b
    assert [x.end.point for x in g.edges_from(a)] == [b]
    assert g.edges_from(b) == []


def test_add_road_inserts_both_directions():
    g, a, b = _two_points()
    g.add_road(a, b, "Main street", "residential", 2.0)
    assert g.edge_count() == 2
    assert g.node(b).neighbours() == [g.node(a)]


def test_edge_count_is_sum_of_outgoing_lists(simple_graph):
    assert simple_graph.edge_count() == sum(
        len(simple_graph.edges_from(p)) for p in simple_graph.vertices()
    )


def test_zero_length_edge_is_allowed():
    g, a, b = _two_points()
    g.add_edge(a, b, "ramp", "link", 0.0)
    assert g.edges_from(a)[0].length == 0.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"end": Point(9.0, 9.0)},
        {"start": None},
        {"road_name": None},
        {"road_type": None},
        {"length": -0.1},
        {"length": math.nan},
        {"length": None},
    ],
)
def test_invalid_edges_raise_and_leave_graph_untouched(kwargs):
    g, a, b = _two_points()
    args = {"start": a, "end": b, "road_name": "x", "road_type": "y", "length": 1.0}
    args.update(kwargs)
    with pytest.raises(InvalidEdgeError):
        g.add_edge(**args)
    assert g.edge_count() == 0


def test_invalid_edge_error_is_a_value_error():
    g, a, _ = _two_points()
    with pytest.raises(ValueError):
        g.add_edge(a, Point(5.0, 5.0), "x", "y", 1.0)


def test_edge_rejects_negative_length_directly():
    n = Node(Point(0.0, 0.0))
    with pytest.raises(InvalidEdgeError):
        Edge(n, n, "loop", "residential", -1.0)


# ---------- Lookup


def test_nearest_vertex_snaps_to_closest(simple_graph):
    assert simple_graph.nearest_vertex(Point(4.1, 0.9)) == Point(4.0, 1.0)
    assert simple_graph.nearest_vertex(Point(8.0, -1.0)) == Point(8.0, -1.0)


def test_nearest_vertex_on_empty_graph_raises():
    with pytest.raises(ValueError):
        RoadGraph().nearest_vertex(Point(0.0, 0.0))
