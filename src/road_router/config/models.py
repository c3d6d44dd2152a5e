import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


class CacheModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = True


# ----------------- GRAPH SOURCES ---------------------


class GraphByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["map", "pickle"] = "map"
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class GraphBySynthetic(BaseModel):
    """Jittered lat/lon grid, for benchmarks and tests."""

    model_config = ConfigDict(extra="forbid")
    by: Literal["synthetic"] = "synthetic"
    rows: int = 10
    cols: int = 10
    seed: int = 123
    spacing_deg: float = 0.01
    stretch_max: float = 1.5
    drop_prob: float = 0.0

    @field_validator("rows", "cols")
    @classmethod
    def _min_size(cls, v: int, info: ValidationInfo) -> int:
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v

    @field_validator("stretch_max")
    @classmethod
    def _stretch(cls, v: float) -> float:
        # lengths below the straight line would break A* admissibility
        if v < 1.0:
            raise ValueError("stretch_max must be >= 1.0")
        return v

    @field_validator("drop_prob")
    @classmethod
    def _prob(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError("drop_prob must be in [0, 1)")
        return v


GraphRef = Annotated[GraphByPath | GraphBySynthetic, Field(discriminator="by")]

# ----------------- SEARCHES ---------------------


class SearchBfsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


class SearchDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class SearchAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: Literal["great_circle", "zero"] = "great_circle"


SearchUnion = Annotated[
    SearchBfsModel | SearchDijkstraModel | SearchAStarModel,
    Field(discriminator="kind"),
]

# ------------------------------------------------------------------


class RouterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    graph: GraphRef
    search: SearchUnion = Field(default_factory=SearchAStarModel)
    cache: CacheModel = CacheModel()
    log: LogModel = LogModel()
