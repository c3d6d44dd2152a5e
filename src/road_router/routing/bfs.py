# routing/bfs.py
from collections import deque

from road_router.domain.entities.geography import Point, Route
from road_router.domain.graph import RoadGraph
from road_router.routing.cache import Metric, RouteCache
from road_router.routing.hooks import SearchHooks
from road_router.routing.paths import SearchSession, VisitFn


def bfs(
    graph: RoadGraph,
    start: Point,
    goal: Point,
    *,
    cache: RouteCache | None = None,
    on_visit: VisitFn | None = None,
    hooks: SearchHooks | None = None,
) -> Route | None:
    """
    Fewest-hops route from `start` to `goal`, ignoring edge lengths.

    Returns None when `goal` is unreachable (or either end is not a vertex).
    """
    s = SearchSession("bfs", Metric.HOPS, start, goal, cache=cache, hooks=hooks, on_visit=on_visit)
    if start not in graph or goal not in graph:
        return s.finish(None)
    hit = s.cached()
    if hit is not None:
        return s.finish(hit)

    queue = deque([graph.node(start)])
    seen = {start}
    while queue:
        current = queue.popleft()
        here = current.point
        s.visit(here)
        if here == goal:
            return s.found()
        spliced = s.try_splice(here)
        if spliced is not None:
            return spliced
        for nxt in current.neighbours():
            if nxt.point not in seen:
                seen.add(nxt.point)
                s.parents[nxt.point] = here
                queue.append(nxt)
    return s.finish(None)
