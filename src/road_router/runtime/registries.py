# runtime/registries.py
from collections.abc import Callable
from functools import partial

import numpy as np

from road_router.app.protocols import SearchFn
from road_router.config.models import (
    GraphByPath,
    GraphBySynthetic,
    GraphRef,
    SearchAStarModel,
    SearchBfsModel,
    SearchDijkstraModel,
    SearchUnion,
)
from road_router.domain.graph import RoadGraph
from road_router.io.synthetic import grid_road_graph
from road_router.routing.bfs import bfs
from road_router.routing.weighted import a_star, dijkstra, straight_line
from road_router.runtime.resources import load_graph_from_path

SearchFactory = Callable[[SearchUnion, dict], SearchFn]

_search_registry: dict[str, SearchFactory] = {}

HEURISTICS = {
    "great_circle": straight_line,
    "zero": lambda a, b: 0.0,
}


# ------------------- Searches ---------------------------


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion, *, deps: dict | None = None) -> SearchFn:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}")
    return factory(cfg, deps or {})


@register_search("bfs")
def _make_bfs(cfg: SearchBfsModel, deps):
    return bfs


@register_search("dijkstra")
def _make_dijkstra(cfg: SearchDijkstraModel, deps):
    return dijkstra


@register_search("astar")
def _make_astar(cfg: SearchAStarModel, deps):
    if cfg.heuristic == "great_circle":
        return a_star
    return partial(a_star, heuristic=HEURISTICS[cfg.heuristic])


# ------------------- Graphs ---------------------------


def resolve_graph(ref: GraphRef | None, *, deps: dict | None = None) -> RoadGraph:
    """
    deps can include:
      - 'graph': RoadGraph  # a prebuilt graph, used when ref is None
    """
    deps = deps or {}
    if ref is None:
        if "graph" in deps:
            return deps["graph"]
        raise ValueError("No graph provided")
    if isinstance(ref, GraphByPath):
        g = load_graph_from_path(ref.file, ref.fmt)
        if g is None:
            if ref.must_exist:
                raise FileNotFoundError(ref.file)
            return RoadGraph()
        return g
    if isinstance(ref, GraphBySynthetic):
        return grid_road_graph(
            ref.rows,
            ref.cols,
            rng=np.random.default_rng(ref.seed),
            spacing_deg=ref.spacing_deg,
            stretch_max=ref.stretch_max,
            drop_prob=ref.drop_prob,
        )
    raise TypeError(ref)
