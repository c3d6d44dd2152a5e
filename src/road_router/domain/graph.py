# road_router/domain/graph.py
from collections.abc import Iterator

import numpy as np

from road_router.domain.entities.geography import (
    EARTH_RADIUS_KM,
    Edge,
    InvalidEdgeError,
    Node,
    Point,
)


class RoadGraph:
    """
    Directed road network keyed by intersection point.

    Edges live only on their "from" node; a two-way road is two edges
    (see `add_road`). Searches treat the graph as read-only.
    """

    def __init__(self):
        self._nodes: dict[Point, Node] = {}

    # --------------- Vertices -----------------------------

    def add_vertex(self, point: Point | None) -> bool:
        if point is None or point in self._nodes:
            return False
        self._nodes[point] = Node(point)
        return True

    def vertex_count(self) -> int:
        return len(self._nodes)

    def vertices(self) -> set[Point]:
        return set(self._nodes)

    def node(self, point: Point) -> Node | None:
        return self._nodes.get(point)

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __contains__(self, point) -> bool:
        return point in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # --------------- Edges --------------------------------

    def add_edge(
        self,
        start: Point,
        end: Point,
        road_name: str,
        road_type: str,
        length: float,
    ) -> Edge:
        if start is None or end is None:
            raise InvalidEdgeError("edge endpoints are required")
        a, b = self._nodes.get(start), self._nodes.get(end)
        if a is None or b is None:
            missing = start if a is None else end
            raise InvalidEdgeError(f"no vertex at {missing} in graph")
        if length is None:
            raise InvalidEdgeError("edge length is required")
        edge = Edge(a, b, road_name, road_type, float(length))
        a.edges.append(edge)
        return edge

    def add_road(
        self,
        a: Point,
        b: Point,
        road_name: str,
        road_type: str,
        length: float,
    ) -> tuple[Edge, Edge]:
        """Insert both directions of a two-way road."""
        return (
            self.add_edge(a, b, road_name, road_type, length),
            self.add_edge(b, a, road_name, road_type, length),
        )

    def edges_from(self, point: Point) -> list[Edge]:
        n = self._nodes.get(point)
        return list(n.edges) if n is not None else []

    def edge_count(self) -> int:
        return sum(len(n.edges) for n in self._nodes.values())

    # --------------- Lookup -------------------------------

    def nearest_vertex(self, point: Point) -> Point:
        """Snap an arbitrary point to the closest intersection (great-circle)."""
        if not self._nodes:
            raise ValueError("graph has no vertices")
        pts = list(self._nodes)
        coords = np.radians(np.array([(p.lat, p.lon) for p in pts], dtype=float))
        lat, lon = np.radians(point.lat), np.radians(point.lon)
        dphi = coords[:, 0] - lat
        dlmb = coords[:, 1] - lon
        s = np.sin(dphi / 2.0) ** 2 + np.cos(lat) * np.cos(coords[:, 0]) * np.sin(dlmb / 2.0) ** 2
        d = 2.0 * EARTH_RADIUS_KM * np.arcsin(np.minimum(1.0, np.sqrt(s)))
        return pts[int(np.argmin(d))]

    def __repr__(self):
        return f"RoadGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"
