# route_planner/io/route_events.py

from dataclasses import dataclass


# Base type for route analytics events
@dataclass
class RouteEvent:
    run_id: str
    name: str  # stable event name
    start: tuple[float, float]
    goal: tuple[float, float]
    expanded: int


@dataclass
class RouteFoundEvent(RouteEvent):
    node_ids: list[int]
    distance_m: float


@dataclass
class RouteUnreachableEvent(RouteEvent):
    reason: str = "open_list_exhausted"


def event_from_result(result, *, run_id: str) -> RouteEvent:
    start = (result.start.x, result.start.y)
    goal = (result.goal.x, result.goal.y)
    if result.found:
        return RouteFoundEvent(
            run_id=run_id,
            name="RouteFound",
            start=start,
            goal=goal,
            expanded=result.expanded,
            node_ids=[n.id for n in result.path],
            distance_m=result.distance_m,
        )
    return RouteUnreachableEvent(
        run_id=run_id, name="RouteUnreachable", start=start, goal=goal, expanded=result.expanded
    )
