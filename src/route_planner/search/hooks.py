# search/hooks.py
from typing import Protocol

from route_planner.domain.entities.geography import Node


class SearchHooks(Protocol):
    def search_start(self, *, start: Node, goal: Node): ...
    def expand(self, node: Node, *, g, h, open_size, expanded): ...
    def search_end(self, *, status, expanded, path_nodes, distance_m, wall_ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
