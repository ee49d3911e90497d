# route_planner/runtime/resources.py
import pickle
from collections.abc import Callable
from functools import lru_cache

from route_planner.domain.route_model import RouteModel
from route_planner.io.map_data import read_map_json
from route_planner.search.errors import MapDataError

MapLoader = Callable[[str], RouteModel]

_map_loader_registry: dict[str, MapLoader] = {}


def register_map_loader(fmt: str):
    def deco(fn: MapLoader):
        _map_loader_registry[fmt] = fn
        return fn

    return deco


@lru_cache(maxsize=8)
def load_map_from_path(file: str, fmt: str) -> RouteModel:
    try:
        loader = _map_loader_registry[fmt]
    except KeyError:
        raise ValueError(f"Unsupported map fmt {fmt!r}") from None
    return loader(file)


@register_map_loader("json")
def _load_json(file: str) -> RouteModel:
    return read_map_json(file)


@register_map_loader("pickle")
def _load_pickle(file: str) -> RouteModel:
    with open(file, "rb") as f:
        model = pickle.load(f)
    if not isinstance(model, RouteModel):
        raise MapDataError(f"{file}: pickle does not hold a RouteModel")
    return model
