# runtime/registries.py
from collections.abc import Callable
from functools import partial
from typing import Any

from route_planner.app.protocols import Heuristic
from route_planner.config.models import (
    HeuristicEuclideanModel,
    HeuristicUnion,
    HeuristicZeroModel,
    MapByPath,
    SearchModel,
)
from route_planner.domain.route_model import RouteModel
from route_planner.policy.heuristics import EuclideanHeuristic, ZeroHeuristic
from route_planner.runtime.resources import load_map_from_path
from route_planner.search.hooks import SearchHooks
from route_planner.search.planner import RoutePlanner

HeuristicFactory = Callable[[HeuristicUnion, dict], Heuristic]
PlannerFactory = Callable[..., RoutePlanner]

_heuristic_registry: dict[str, HeuristicFactory] = {}


# ------------------- Heuristics ---------------------------


def register_heuristic(kind: str):
    def deco(fn: HeuristicFactory):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion, *, deps: dict | None = None) -> Heuristic:
    try:
        factory = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_heuristic("euclidean")
def _make_euclidean(cfg: HeuristicEuclideanModel, deps):
    return EuclideanHeuristic()


@register_heuristic("zero")
def _make_zero(cfg: HeuristicZeroModel, deps):
    return ZeroHeuristic()


# ------------------- Maps ---------------------------


def resolve_map(ref: MapByPath | None, *, deps: dict[str, Any]) -> RouteModel:
    """
    deps can include:
      - 'model': RouteModel  # a prebuilt model, used when no ref is given
    """
    if ref is None:
        if "model" in deps:
            return deps["model"]
        raise ValueError("No map provided")
    if isinstance(ref, MapByPath):
        return load_map_from_path(ref.file, ref.fmt)
    raise TypeError(ref)


# ------------------- Planners ---------------------------


def make_planner_factory(cfg: SearchModel, *, hooks: SearchHooks | None = None) -> PlannerFactory:
    """Return a callable (model, start_x, start_y, end_x, end_y) -> fresh RoutePlanner."""
    return partial(
        RoutePlanner,
        heuristic=make_heuristic(cfg.heuristic),
        expansion=cfg.expansion,
        tie_break=cfg.tie_break,
        hooks=hooks,
    )
