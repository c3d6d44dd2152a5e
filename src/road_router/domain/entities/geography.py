import math
from dataclasses import dataclass, field

EARTH_RADIUS_KM = 6371.0


class InvalidEdgeError(ValueError):
    """Edge rejected by the graph: unknown endpoint, missing metadata or bad length."""


# Core geometry types used by the router
@dataclass(frozen=True)
class Point:
    lat: float  # degrees
    lon: float

    def distance(self, other: "Point") -> float:
        """Great-circle distance to `other` in km."""
        return haversine_km(self.lat, self.lon, other.lat, other.lon)

    def __str__(self):
        return f"({self.lat:g}, {self.lon:g})"


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    s = math.sin(dphi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2.0) ** 2
    return 2.0 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(s)))


# Ordered start -> goal sequence, both ends inclusive
Route = list[Point]


@dataclass(eq=False)
class Node:
    point: Point
    edges: list["Edge"] = field(default_factory=list)

    def neighbours(self) -> list["Node"]:
        return [e.end for e in self.edges]

    def __repr__(self):
        return f"Node({self.point}, out={len(self.edges)})"


@dataclass(frozen=True, eq=False)
class Edge:
    start: Node
    end: Node
    name: str
    road_type: str
    length: float  # km

    def __post_init__(self):
        if self.name is None or self.road_type is None:
            raise InvalidEdgeError("road name and road type are required")
        if not math.isfinite(self.length) or self.length < 0:
            raise InvalidEdgeError(f"edge length must be finite and >= 0, got {self.length!r}")

    def __repr__(self):
        return f"Edge({self.start.point} -> {self.end.point}, {self.name!r}, {self.length:.3f})"
