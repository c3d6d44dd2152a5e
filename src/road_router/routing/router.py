from road_router.app.protocols import SearchFn
from road_router.domain.entities.geography import Point, Route
from road_router.domain.graph import RoadGraph
from road_router.routing.bfs import bfs
from road_router.routing.cache import RouteCache
from road_router.routing.hooks import NoopHooks, SearchHooks
from road_router.routing.paths import VisitFn
from road_router.routing.weighted import a_star, dijkstra


class Router:
    """
    Query surface over one graph and one shared cache (None: no caching).

    Searches keep their scratch state local, so several threads may query
    the same Router; mutating the graph meanwhile is the caller's problem
    (clear the cache afterwards).
    """

    def __init__(
        self,
        graph: RoadGraph,
        cache: RouteCache | None = None,
        hooks: SearchHooks | None = None,
        default: SearchFn = a_star,
    ):
        self.G = graph
        self.cache = cache
        self.hooks = hooks or NoopHooks()
        self.default = default
        self._searches: dict[str, SearchFn] = {"bfs": bfs, "dijkstra": dijkstra, "astar": a_star}

    def bfs(self, start: Point, goal: Point, on_visit: VisitFn | None = None) -> Route | None:
        return bfs(self.G, start, goal, cache=self.cache, on_visit=on_visit, hooks=self.hooks)

    def dijkstra(self, start: Point, goal: Point, on_visit: VisitFn | None = None) -> Route | None:
        return dijkstra(self.G, start, goal, cache=self.cache, on_visit=on_visit, hooks=self.hooks)

    def a_star(self, start: Point, goal: Point, on_visit: VisitFn | None = None) -> Route | None:
        return a_star(self.G, start, goal, cache=self.cache, on_visit=on_visit, hooks=self.hooks)

    def route(
        self,
        start: Point,
        goal: Point,
        algorithm: str | None = None,
        on_visit: VisitFn | None = None,
    ) -> Route | None:
        if algorithm is None:
            search = self.default
        else:
            try:
                search = self._searches[algorithm]
            except KeyError:
                raise ValueError(f"Unknown search algorithm {algorithm!r}")
        return search(self.G, start, goal, cache=self.cache, on_visit=on_visit, hooks=self.hooks)

    def snap(self, p: Point) -> Point:
        return self.G.nearest_vertex(p)

    def route_between(self, a: Point, b: Point, algorithm: str | None = None) -> Route | None:
        """Route between arbitrary points by snapping both to their nearest intersections."""
        return self.route(self.snap(a), self.snap(b), algorithm=algorithm)

    def clear_cache(self, start: Point | None = None, goal: Point | None = None) -> None:
        if self.cache is not None:
            self.cache.clear(start, goal)
