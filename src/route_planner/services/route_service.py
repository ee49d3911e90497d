# route_planner/services/route_service.py
from route_planner.app.protocols import RouteGraph
from route_planner.io.search_logging import SearchLogging
from route_planner.runtime.registries import PlannerFactory
from route_planner.search.planner import RouteResult


class RouteService:
    """Routes requests over one shared model, with a fresh planner session per request."""

    def __init__(
        self,
        model: RouteGraph,
        planner_factory: PlannerFactory,
        search_logging: SearchLogging | None = None,
    ):
        self.model = model
        self.planner_factory = planner_factory
        self.search_logging = search_logging

    def route(self, start: tuple[float, float], end: tuple[float, float]) -> RouteResult:
        """start/end are (x, y) in percent of the map extent."""
        planner = self.planner_factory(self.model, start[0], start[1], end[0], end[1])
        result = planner.a_star_search()
        if self.search_logging is not None:
            self.search_logging.route(result)
        return result
