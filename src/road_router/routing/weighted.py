# routing/weighted.py
import heapq
import math
from collections.abc import Callable
from dataclasses import dataclass

from road_router.domain.entities.geography import Point, Route
from road_router.domain.graph import RoadGraph
from road_router.routing.cache import Metric, RouteCache
from road_router.routing.hooks import SearchHooks
from road_router.routing.paths import SearchSession, VisitFn

Heuristic = Callable[[Point, Point], float]


@dataclass
class SearchState:
    """Scratch fields for one node during one search."""

    distance_from_start: float = math.inf
    distance_to_goal: float = math.inf

    @property
    def f(self) -> float:
        return self.distance_from_start + self.distance_to_goal


def straight_line(a: Point, b: Point) -> float:
    return a.distance(b)


def best_first(
    graph: RoadGraph,
    start: Point,
    goal: Point,
    *,
    algorithm: str,
    heuristic: Heuristic | None = None,
    cache: RouteCache | None = None,
    on_visit: VisitFn | None = None,
    hooks: SearchHooks | None = None,
) -> Route | None:
    """
    Lazy-deletion best-first search ordered by g (Dijkstra) or g + h (A*).

    Stale heap entries for settled nodes are dropped without a visit.
    """
    s = SearchSession(
        algorithm, Metric.LENGTH, start, goal, cache=cache, hooks=hooks, on_visit=on_visit
    )
    if start not in graph or goal not in graph:
        return s.finish(None)
    hit = s.cached()
    if hit is not None:
        return s.finish(hit)

    state = {n.point: SearchState() for n in graph.nodes()}
    state[start].distance_from_start = 0.0
    state[start].distance_to_goal = 0.0

    def priority(p: Point) -> float:
        st = state[p]
        return st.f if heuristic is not None else st.distance_from_start

    # (priority, insertion seq, point): seq keeps equal priorities FIFO
    seq = 0
    frontier: list[tuple[float, int, Point]] = [(0.0, seq, start)]
    settled: set[Point] = set()
    while frontier:
        _, _, here = heapq.heappop(frontier)
        if here in settled:
            continue
        settled.add(here)
        s.visit(here)
        if here == goal:
            return s.found()
        spliced = s.try_splice(here)
        if spliced is not None:
            return spliced

        g = state[here].distance_from_start
        for edge in graph.node(here).edges:
            other = edge.end.point
            if other in settled:
                continue
            candidate = g + edge.length
            st = state[other]
            if candidate < st.distance_from_start:
                st.distance_from_start = candidate
                if heuristic is not None:
                    st.distance_to_goal = heuristic(other, goal)
                s.parents[other] = here
                seq += 1
                heapq.heappush(frontier, (priority(other), seq, other))
    return s.finish(None)


def dijkstra(
    graph: RoadGraph,
    start: Point,
    goal: Point,
    *,
    cache: RouteCache | None = None,
    on_visit: VisitFn | None = None,
    hooks: SearchHooks | None = None,
) -> Route | None:
    """Minimum total-length route; None when unreachable."""
    return best_first(
        graph, start, goal, algorithm="dijkstra", cache=cache, on_visit=on_visit, hooks=hooks
    )


def a_star(
    graph: RoadGraph,
    start: Point,
    goal: Point,
    *,
    heuristic: Heuristic = straight_line,
    cache: RouteCache | None = None,
    on_visit: VisitFn | None = None,
    hooks: SearchHooks | None = None,
) -> Route | None:
    """
    Minimum total-length route guided by `heuristic` (great-circle km by default).

    The heuristic must never overestimate the remaining road distance; the
    default holds whenever every edge is at least as long as the straight
    line between its endpoints.
    """
    return best_first(
        graph,
        start,
        goal,
        algorithm="astar",
        heuristic=heuristic,
        cache=cache,
        on_visit=on_visit,
        hooks=hooks,
    )
