# road_router/io/map_loader.py
import logging
import shlex
from pathlib import Path

from road_router.domain.entities.geography import Point
from road_router.domain.graph import RoadGraph

log = logging.getLogger("road_router.io")


class MapFormatError(ValueError):
    pass


def parse_map_line(line: str, *, source: str = "<map>", lineno: int = 0):
    """`lat1 lon1 lat2 lon2 "road name" road_type` -> (a, b, name, type)."""
    try:
        parts = shlex.split(line)
    except ValueError as e:
        raise MapFormatError(f"{source}:{lineno}: {e}") from e
    if len(parts) != 6:
        raise MapFormatError(f"{source}:{lineno}: expected 6 fields, got {len(parts)}")
    try:
        lat1, lon1, lat2, lon2 = (float(x) for x in parts[:4])
    except ValueError as e:
        raise MapFormatError(f"{source}:{lineno}: bad coordinate ({e})") from e
    return Point(lat1, lon1), Point(lat2, lon2), parts[4], parts[5]


def load_road_map(path: str | Path, graph: RoadGraph | None = None) -> RoadGraph:
    """
    Read a road map where every line is one directed segment.

    Endpoints become vertices; the edge length is the great-circle distance
    in km. Blank lines and `#` comments are skipped.
    """
    graph = graph if graph is not None else RoadGraph()
    path = Path(path)
    added = 0
    with path.open(encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            a, b, name, kind = parse_map_line(line, source=str(path), lineno=lineno)
            graph.add_vertex(a)
            graph.add_vertex(b)
            graph.add_edge(a, b, name, kind, a.distance(b))
            added += 1
    log.debug("loaded %s: %d segments, %r", path, added, graph)
    return graph
