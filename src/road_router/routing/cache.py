# routing/cache.py
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from road_router.domain.entities.geography import Point, Route


class Metric(Enum):
    HOPS = "hops"  # BFS
    LENGTH = "length"  # Dijkstra, A*


class PathCache:
    """
    Thread-safe (start, goal) -> route store.

    Each get/put/clear is atomic on its own; there is no check-then-put
    transaction, and the last of two racing puts for one key wins.
    Routes are stored as tuples and handed out as fresh lists.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._routes: dict[tuple[Point, Point], tuple[Point, ...]] = {}

    def get(self, start: Point, goal: Point) -> Route | None:
        with self._lock:
            hit = self._routes.get((start, goal))
        return list(hit) if hit is not None else None

    def put(self, start: Point, goal: Point, route: Sequence[Point]) -> None:
        frozen = tuple(route)
        with self._lock:
            self._routes[(start, goal)] = frozen

    def clear(self, start: Point | None = None, goal: Point | None = None) -> None:
        with self._lock:
            if start is None and goal is None:
                self._routes.clear()
            else:
                self._routes.pop((start, goal), None)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._routes

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)


@dataclass
class RouteCache:
    """Shared cache handle, partitioned so hop-optimal and length-optimal routes never mix."""

    hops: PathCache = field(default_factory=PathCache)
    length: PathCache = field(default_factory=PathCache)

    def for_metric(self, metric: Metric) -> PathCache:
        if metric is Metric.HOPS:
            return self.hops
        if metric is Metric.LENGTH:
            return self.length
        raise ValueError(f"Unknown metric {metric!r}")

    def clear(self, start: Point | None = None, goal: Point | None = None) -> None:
        self.hops.clear(start, goal)
        self.length.clear(start, goal)

    def __len__(self) -> int:
        return len(self.hops) + len(self.length)
