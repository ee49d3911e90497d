# route_planner/io/map_data.py
"""
JSON map format.

    {
      "metric_scale": 1250.0,                     # meters per map unit, optional
      "nodes": [{"id": 1, "x": 0.1, "y": 0.2}, ...],
      "ways": [{"nodes": [1, 2, 3], "kind": "residential"}, ...],
      "excluded_kinds": ["footway"]               # optional
    }

Nodes may carry "lat"/"lon" instead of "x"/"y". They are then projected to
Web-Mercator meters and normalized by the shorter side of the bounding box
("bounds": {"minlat", "minlon", "maxlat", "maxlon"} or the node extent), which
also becomes the metric_scale.
"""

import json
import math
from collections.abc import Mapping
from pathlib import Path

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from route_planner.domain.entities.geography import Node, Way
from route_planner.domain.route_model import RouteModel
from route_planner.search.errors import MapDataError

EARTH_RADIUS_M = 6378137.0
DEG_TO_RAD = math.pi / 180.0


def project_lat_lon(lat, lon) -> tuple[np.ndarray, np.ndarray]:
    lat = np.asarray(lat, dtype=float)
    lon = np.asarray(lon, dtype=float)
    x = lon * DEG_TO_RAD * EARTH_RADIUS_M
    y = np.log(np.tan(lat * DEG_TO_RAD / 2 + math.pi / 4)) * EARTH_RADIUS_M
    return x, y


class MapNodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)
    id: int
    x: float | None = None
    y: float | None = None
    lat: float | None = None
    lon: float | None = None

    @model_validator(mode="after")
    def _one_position(self):
        has_xy = self.x is not None and self.y is not None
        has_geo = self.lat is not None and self.lon is not None
        if not (has_xy or has_geo):
            raise ValueError(f"node {self.id} needs x/y or lat/lon")
        return self

    @property
    def is_geo(self) -> bool:
        return self.lat is not None and self.lon is not None


class MapWayModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)
    nodes: list[int]
    kind: str = "road"


class MapBoundsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)
    minlat: float
    minlon: float
    maxlat: float
    maxlon: float


class MapDataModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)
    metric_scale: float = 1.0
    nodes: list[MapNodeModel]
    ways: list[MapWayModel] = Field(default_factory=list)
    excluded_kinds: list[str] = Field(default_factory=lambda: ["footway"])
    bounds: MapBoundsModel | None = None


def _normalize_geo(nodes: list[MapNodeModel], bounds: MapBoundsModel | None):
    lat = np.array([n.lat for n in nodes])
    lon = np.array([n.lon for n in nodes])
    if bounds:
        lo = (bounds.minlat, bounds.minlon)
        hi = (bounds.maxlat, bounds.maxlon)
    else:
        lo = (float(lat.min()), float(lon.min()))
        hi = (float(lat.max()), float(lon.max()))

    x, y = project_lat_lon(lat, lon)
    x0, y0 = project_lat_lon(*lo)
    x1, y1 = project_lat_lon(*hi)
    scale = float(min(x1 - x0, y1 - y0))
    if not scale > 0:
        raise MapDataError("map bounds are degenerate, cannot derive a metric scale")
    return (x - x0) / scale, (y - y0) / scale, scale


def model_from_dict(data: Mapping) -> RouteModel:
    try:
        parsed = MapDataModel.model_validate(data)
    except ValidationError as e:
        raise MapDataError(f"malformed map data: {e}") from e

    ids = [n.id for n in parsed.nodes]
    if parsed.nodes and all(n.is_geo for n in parsed.nodes):
        xs, ys, metric_scale = _normalize_geo(parsed.nodes, parsed.bounds)
    elif all(n.x is not None and n.y is not None for n in parsed.nodes):
        xs = [n.x for n in parsed.nodes]
        ys = [n.y for n in parsed.nodes]
        metric_scale = parsed.metric_scale
    else:
        raise MapDataError("map mixes lat/lon nodes with x/y nodes")

    nodes = [Node(i, float(x), float(y)) for i, x, y in zip(ids, xs, ys)]
    ways = [Way(tuple(w.nodes), w.kind) for w in parsed.ways]
    return RouteModel(nodes, ways, metric_scale, excluded_kinds=parsed.excluded_kinds)


def read_map_json(path: str | Path) -> RouteModel:
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MapDataError(f"{path}: not valid JSON ({e})") from e
    return model_from_dict(data)
