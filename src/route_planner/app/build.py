# route_planner/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from route_planner.config.models import RouteRequestModel
from route_planner.domain.route_model import RouteModel
from route_planner.io.recorder import JsonlSink, Recorder, Sink
from route_planner.io.search_logging import SearchLogging
from route_planner.runtime.registries import make_planner_factory, resolve_map
from route_planner.search.hooks import NoopHooks
from route_planner.search.planner import RouteResult
from route_planner.services.route_service import RouteService


@dataclass
class App:
    config: RouteRequestModel
    model: RouteModel
    routes: RouteService

    def run(self) -> RouteResult:
        start, end = self.config.start, self.config.end
        return self.routes.route((start.x, start.y), (end.x, end.y))


def build(
    cfg: RouteRequestModel | Mapping,
    *,
    model: RouteModel | None = None,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] = (),
) -> App:
    # 0) Validate config
    request = cfg if isinstance(cfg, RouteRequestModel) else RouteRequestModel.model_validate(cfg)

    # 1) Map (a prebuilt model wins over the configured file)
    route_model = resolve_map(None if model is not None else request.map, deps={"model": model})

    # 2) Hooks & recorder
    search_logging = None
    hooks = NoopHooks()
    if use_logging:
        search_logging = SearchLogging(
            run_id=request.run_id,
            recorder=Recorder(*(sinks or (JsonlSink(),))),
            level=request.log.level,
            debug=request.log.debug,
            sample_every=request.log.sample_every,
        )
        hooks = search_logging

    # 3) Planner sessions
    factory = make_planner_factory(request.search, hooks=hooks)
    routes = RouteService(route_model, factory, search_logging=search_logging)

    return App(config=request, model=route_model, routes=routes)
