import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1000, ge=1)


# ----------------- MAP ---------------------


class MapByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    fmt: Literal["json", "pickle"] = "json"

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class PercentPoint(BaseModel):
    """Position in percent of the map extent, origin at the lower left."""

    model_config = ConfigDict(extra="forbid")
    x: float = Field(ge=0.0, le=100.0)
    y: float = Field(ge=0.0, le=100.0)


# ----------------- SEARCH ---------------------


class HeuristicEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class HeuristicZeroModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["zero"] = "zero"


HeuristicUnion = Annotated[
    HeuristicEuclideanModel | HeuristicZeroModel,
    Field(discriminator="kind"),
]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: HeuristicUnion = Field(default_factory=HeuristicEuclideanModel)
    expansion: Literal["relaxed", "first_discovery"] = "relaxed"
    tie_break: Literal["insertion", "lowest_h"] = "insertion"


# ------------------------------------------------------------------


class RouteRequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "route"
    run_id: str = "local"
    map: MapByPath
    start: PercentPoint
    end: PercentPoint
    search: SearchModel = SearchModel()
    log: LogModel = LogModel()
