# road_router/io/synthetic.py
import numpy as np

from road_router.domain.entities.geography import Point
from road_router.domain.graph import RoadGraph


def grid_road_graph(
    rows: int,
    cols: int,
    *,
    rng: np.random.Generator,
    origin: Point = Point(0.0, 0.0),
    spacing_deg: float = 0.01,
    stretch_max: float = 1.5,
    drop_prob: float = 0.0,
) -> RoadGraph:
    """
    Jittered rows x cols grid of two-way roads.

    Road length = great-circle distance * U(1, stretch_max), so straight-line
    distance stays an admissible A* heuristic. With drop_prob > 0 some roads
    are left out, which can disconnect the grid.
    """
    jitter = rng.uniform(-0.25, 0.25, size=(rows, cols, 2)) * spacing_deg
    pts = [
        [
            Point(
                round(origin.lat + r * spacing_deg + float(jitter[r, c, 0]), 7),
                round(origin.lon + c * spacing_deg + float(jitter[r, c, 1]), 7),
            )
            for c in range(cols)
        ]
        for r in range(rows)
    ]
    g = RoadGraph()
    for row in pts:
        for p in row:
            g.add_vertex(p)

    for r in range(rows):
        for c in range(cols):
            a = pts[r][c]
            for rr, cc, kind in ((r, c + 1, "street"), (r + 1, c, "avenue")):
                if rr >= rows or cc >= cols:
                    continue
                if drop_prob and rng.random() < drop_prob:
                    continue
                b = pts[rr][cc]
                length = a.distance(b) * float(rng.uniform(1.0, stretch_max))
                g.add_road(a, b, f"{kind} {r}-{c}", kind, length)
    return g
