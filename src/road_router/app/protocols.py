from typing import Protocol, runtime_checkable

from road_router.domain.entities.geography import Point, Route
from road_router.domain.graph import RoadGraph
from road_router.routing.cache import RouteCache
from road_router.routing.hooks import SearchHooks
from road_router.routing.paths import VisitFn


@runtime_checkable
class SearchFn(Protocol):
    """
    Responsibilities:
      • Return a start -> goal route (both inclusive) or None when unreachable.
      • Read and fill the cache partition matching its optimality criterion.
      • Call on_visit once per processed frontier node, in processing order.
    """

    def __call__(
        self,
        graph: RoadGraph,
        start: Point,
        goal: Point,
        *,
        cache: RouteCache | None = None,
        on_visit: VisitFn | None = None,
        hooks: SearchHooks | None = None,
    ) -> Route | None: ...
