# routing/hooks.py
from typing import Protocol

from road_router.domain.entities.geography import Point, Route


class SearchHooks(Protocol):
    def search_start(self, *, algorithm: str, start: Point, goal: Point): ...
    def cache_hit(self, *, algorithm: str, start: Point, goal: Point, hops: int): ...
    def splice(self, *, algorithm: str, start: Point, via: Point, goal: Point, hops: int): ...
    def visit(self, *, algorithm: str, point: Point, visited: int): ...
    def cache_put(self, *, metric: str, start: Point, goal: Point, hops: int): ...
    def search_end(
        self,
        *,
        algorithm: str,
        start: Point,
        goal: Point,
        route: Route | None,
        visited: int,
        wall_ms: float,
    ): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def cache_hit(self, **_):
        pass

    def splice(self, **_):
        pass

    def visit(self, **_):
        pass

    def cache_put(self, **_):
        pass

    def search_end(self, **_):
        pass
