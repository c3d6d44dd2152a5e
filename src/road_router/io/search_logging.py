# io/search_logging.py
import json
import logging
import sys

from road_router.routing.hooks import NoopHooks


def _default_json_logger(name="road_router", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _pt(p):
    return None if p is None else [p.lat, p.lon]


class SearchLogging(NoopHooks):
    """
    Structured logs for search lifecycle and cache traffic.
    Per-node visits are DEBUG only and sampled every `sample_every` nodes.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self.searches = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def search_start(self, *, algorithm, start, goal):
        self.searches += 1
        if self.debug:
            self._emit(
                "DEBUG", "search_start", algorithm=algorithm, start=_pt(start), goal=_pt(goal)
            )

    def cache_hit(self, *, algorithm, start, goal, hops):
        self._emit(
            "INFO", "cache_hit", algorithm=algorithm, start=_pt(start), goal=_pt(goal), hops=hops
        )

    def splice(self, *, algorithm, start, via, goal, hops):
        self._emit(
            "INFO",
            "cache_splice",
            algorithm=algorithm,
            start=_pt(start),
            via=_pt(via),
            goal=_pt(goal),
            hops=hops,
        )

    def visit(self, *, algorithm, point, visited):
        if self.debug and (visited % self.sample_every) == 0:
            self._emit("DEBUG", "visit", algorithm=algorithm, point=_pt(point), visited=visited)

    def cache_put(self, *, metric, start, goal, hops):
        if self.debug:
            self._emit(
                "DEBUG", "cache_put", metric=metric, start=_pt(start), goal=_pt(goal), hops=hops
            )

    def search_end(self, *, algorithm, start, goal, route, visited, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            algorithm=algorithm,
            start=_pt(start),
            goal=_pt(goal),
            found=route is not None,
            hops=None if route is None else len(route) - 1,
            visited=visited,
            wall_ms=round(wall_ms, 3),
        )
