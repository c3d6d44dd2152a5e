# road_router/runtime/resources.py
import os
import pickle
from functools import lru_cache

from road_router.domain.graph import RoadGraph
from road_router.io.map_loader import load_road_map


@lru_cache(maxsize=8)
def load_graph_from_path(file: str, fmt: str) -> RoadGraph | None:
    # Memoized: callers share one read-only graph per (file, fmt)
    if not os.path.exists(file):
        return None
    if fmt == "map":
        return load_road_map(file)
    if fmt == "pickle":
        with open(file, "rb") as f:
            g = pickle.load(f)
        if not isinstance(g, RoadGraph):
            raise TypeError(f"{file} does not hold a RoadGraph (got {type(g).__name__})")
        return g
    raise ValueError(f"Unsupported graph fmt {fmt!r}")
