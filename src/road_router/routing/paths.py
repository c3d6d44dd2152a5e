# routing/paths.py
import time
from collections.abc import Callable, Sequence

from road_router.domain.entities.geography import Point, Route
from road_router.domain.graph import RoadGraph
from road_router.routing.cache import Metric, PathCache, RouteCache
from road_router.routing.hooks import NoopHooks, SearchHooks

VisitFn = Callable[[Point], None]


def reconstruct(parents: dict[Point, Point], start: Point, end: Point) -> Route:
    """Walk the predecessor map back from `end` to `start`."""
    route = [end]
    cur = end
    while cur != start:
        cur = parents[cur]
        route.append(cur)
    route.reverse()
    return route


def splice(prefix: Sequence[Point], suffix: Sequence[Point]) -> Route:
    # prefix ends where suffix begins; keep that point once
    return list(prefix[:-1]) + list(suffix)


def hop_count(route: Sequence[Point] | None) -> int | None:
    return None if route is None else len(route) - 1


def route_length(graph: RoadGraph, route: Sequence[Point] | None) -> float | None:
    """Total km along `route`, taking the shortest edge between consecutive points."""
    if route is None:
        return None
    total = 0.0
    for a, b in zip(route, route[1:]):
        lengths = [e.length for e in graph.edges_from(a) if e.end.point == b]
        if not lengths:
            raise ValueError(f"no edge {a} -> {b} in graph")
        total += min(lengths)
    return total


class SearchSession:
    """Per-call bookkeeping shared by the three searches: cache, predecessors, hooks."""

    def __init__(
        self,
        algorithm: str,
        metric: Metric,
        start: Point,
        goal: Point,
        *,
        cache: RouteCache | None = None,
        hooks: SearchHooks | None = None,
        on_visit: VisitFn | None = None,
    ):
        self.algorithm, self.metric, self.start, self.goal = algorithm, metric, start, goal
        self.store: PathCache | None = cache.for_metric(metric) if cache is not None else None
        self.hooks = hooks or NoopHooks()
        self.on_visit = on_visit
        self.parents: dict[Point, Point] = {}
        self.visited = 0
        self._t0 = time.perf_counter()
        self.hooks.search_start(algorithm=algorithm, start=start, goal=goal)

    # --------------- Cache -----------------------------

    def cached(self) -> Route | None:
        if self.store is None:
            return None
        hit = self.store.get(self.start, self.goal)
        if hit is not None:
            self.hooks.cache_hit(
                algorithm=self.algorithm, start=self.start, goal=self.goal, hops=len(hit) - 1
            )
        return hit

    def try_splice(self, via: Point) -> Route | None:
        """Finish early through a cached (via, goal) route, if one exists."""
        if self.store is None or via == self.goal:
            return None
        suffix = self.store.get(via, self.goal)
        if suffix is None:
            return None
        prefix = reconstruct(self.parents, self.start, via)
        # a suffix that re-enters the prefix would make the route loop
        if not set(prefix[:-1]).isdisjoint(suffix):
            return None
        route = splice(prefix, suffix)
        self.hooks.splice(
            algorithm=self.algorithm,
            start=self.start,
            via=via,
            goal=self.goal,
            hops=len(route) - 1,
        )
        self._remember(route)
        return self.finish(route)

    def _remember(self, route: Route) -> None:
        if self.store is None:
            return
        self.store.put(self.start, self.goal, route)
        self.hooks.cache_put(
            metric=self.metric.value, start=self.start, goal=self.goal, hops=len(route) - 1
        )

    # --------------- Frontier --------------------------

    def visit(self, point: Point) -> None:
        self.visited += 1
        if self.on_visit is not None:
            self.on_visit(point)
        self.hooks.visit(algorithm=self.algorithm, point=point, visited=self.visited)

    # --------------- Outcomes --------------------------

    def found(self) -> Route:
        route = reconstruct(self.parents, self.start, self.goal)
        self._remember(route)
        return self.finish(route)

    def finish(self, route: Route | None) -> Route | None:
        self.hooks.search_end(
            algorithm=self.algorithm,
            start=self.start,
            goal=self.goal,
            route=route,
            visited=self.visited,
            wall_ms=(time.perf_counter() - self._t0) * 1000,
        )
        return route
