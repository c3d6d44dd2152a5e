# road_router/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from road_router.app.protocols import SearchFn
from road_router.config.models import RouterModel
from road_router.domain.entities.geography import Point, Route
from road_router.domain.graph import RoadGraph
from road_router.io.search_logging import SearchLogging  # JSON logs
from road_router.routing.cache import RouteCache
from road_router.routing.hooks import NoopHooks, SearchHooks
from road_router.routing.router import Router
from road_router.runtime.registries import make_search, resolve_graph


@dataclass
class App:
    graph: RoadGraph
    cache: RouteCache | None
    hooks: SearchHooks
    search: SearchFn
    router: Router

    def route(self, start: Point, goal: Point, on_visit=None) -> Route | None:
        """Run the configured search against the shared graph and cache."""
        return self.search(
            self.graph, start, goal, cache=self.cache, on_visit=on_visit, hooks=self.hooks
        )


def build(
    cfg: RouterModel | Mapping,
    *,
    graph: RoadGraph | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, RouterModel) else RouterModel.model_validate(cfg)

    # 1) Graph (a prebuilt one wins over the configured source)
    g = graph if graph is not None else resolve_graph(model.graph)

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Cache & search
    cache = RouteCache() if model.cache.enabled else None
    search = make_search(model.search)

    # 4) Router shares the same cache handle
    router = Router(g, cache=cache, hooks=hooks, default=search)
    return App(graph=g, cache=cache, hooks=hooks, search=search, router=router)
