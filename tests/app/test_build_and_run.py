# tests/app/test_build_and_run.py
import pickle
from pathlib import Path

import pytest
from pydantic import ValidationError

from road_router.app.build import build
from road_router.config.models import RouterModel
from road_router.domain.entities.geography import Point
from road_router.io.map_loader import load_road_map
from road_router.routing.hooks import NoopHooks
from road_router.runtime.registries import make_search, resolve_graph

SIMPLE_MAP = Path(__file__).parents[1] / "data" / "simpletest.map"


def test_build_runs_on_synthetic_graph():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "graph": {"by": "synthetic", "rows": 4, "cols": 4, "seed": 3},
        "search": {"kind": "dijkstra"},
    }
    app = build(cfg, use_logging=False)
    assert app.graph.vertex_count() == 16
    pts = sorted(app.graph.vertices(), key=lambda p: (p.lat, p.lon))
    route = app.route(pts[0], pts[-1])
    assert route[0] == pts[0] and route[-1] == pts[-1]
    assert app.cache.length.get(pts[0], pts[-1]) == route


def test_build_from_map_file_with_bfs():
    app = build(
        {
            "name": "simple",
            "graph": {"by": "path", "file": str(SIMPLE_MAP)},
            "search": {"kind": "bfs"},
        },
        use_logging=False,
    )
    assert isinstance(app.hooks, NoopHooks)
    assert app.route(Point(1.0, 1.0), Point(8.0, -1.0)) == [
        Point(1.0, 1.0),
        Point(4.0, 1.0),
        Point(7.0, 3.0),
        Point(8.0, -1.0),
    ]
    # router shares the app's cache
    assert app.router.bfs(Point(1.0, 1.0), Point(8.0, -1.0)) == app.cache.hops.get(
        Point(1.0, 1.0), Point(8.0, -1.0)
    )


def test_prebuilt_graph_wins(simple_graph):
    cfg = {"name": "x", "graph": {"by": "path", "file": "/nope.map"}}
    app = build(cfg, graph=simple_graph, use_logging=False)
    assert app.graph is simple_graph


def test_cache_can_be_disabled():
    app = build(
        {
            "name": "nocache",
            "graph": {"by": "path", "file": str(SIMPLE_MAP)},
            "cache": {"enabled": False},
        },
        use_logging=False,
    )
    assert app.cache is None and app.router.cache is None
    seen_1, seen_2 = [], []
    app.route(Point(1.0, 1.0), Point(8.0, -1.0), on_visit=seen_1.append)
    app.route(Point(1.0, 1.0), Point(8.0, -1.0), on_visit=seen_2.append)
    assert len(seen_1) == len(seen_2) == 5


def test_missing_graph_file():
    with pytest.raises(FileNotFoundError):
        build({"name": "x", "graph": {"by": "path", "file": "/no/such.map"}}, use_logging=False)
    app = build(
        {"name": "x", "graph": {"by": "path", "file": "/does/not/exist.map", "must_exist": False}},
        use_logging=False,
    )
    assert app.graph.vertex_count() == 0
    assert app.route(Point(0.0, 0.0), Point(1.0, 1.0)) is None


def test_pickled_graph_source(tmp_path):
    f = tmp_path / "simple.pkl"
    f.write_bytes(pickle.dumps(load_road_map(SIMPLE_MAP)))
    model = RouterModel.model_validate(
        {"name": "p", "graph": {"by": "path", "file": str(f), "fmt": "pickle"}}
    )
    g = resolve_graph(model.graph)
    assert g.vertex_count() == 9 and g.edge_count() == 22


@pytest.mark.parametrize(
    "cfg",
    [
        {"name": "x", "graph": {"by": "synthetic"}, "bogus": 1},
        {"name": "x", "graph": {"by": "synthetic", "stretch_max": 0.5}},
        {"name": "x", "graph": {"by": "synthetic", "rows": 0}},
        {"name": "x", "graph": {"by": "synthetic"}, "search": {"kind": "greedy"}},
        {"name": "x", "graph": {"by": "synthetic"}, "log": {"sample_every": 0}},
    ],
)
def test_invalid_config_is_rejected(cfg):
    with pytest.raises(ValidationError):
        RouterModel.model_validate(cfg)


def test_zero_heuristic_astar_from_registry(simple_graph):
    model = RouterModel.model_validate(
        {
            "name": "x",
            "graph": {"by": "synthetic"},
            "search": {"kind": "astar", "heuristic": "zero"},
        }
    )
    search = make_search(model.search)
    seen = []
    search(simple_graph, Point(1.0, 1.0), Point(8.0, -1.0), on_visit=seen.append)
    assert len(seen) == 9


def test_resolve_graph_needs_a_source():
    with pytest.raises(ValueError):
        resolve_graph(None)
