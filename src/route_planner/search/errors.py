# search/errors.py


class RoutePlannerError(Exception):
    """Base class for every error raised by route_planner."""


class InvalidEndpointError(RoutePlannerError):
    """Nearest-node resolution produced no node (empty graph)."""


class PathReconstructionError(RoutePlannerError):
    """Parent chain is broken or cyclic. Always a bug, never a no-path result."""


class EmptyOpenListError(RoutePlannerError, IndexError):
    pass


class SearchAlreadyRunError(RoutePlannerError):
    pass


class MapDataError(RoutePlannerError, ValueError):
    pass
