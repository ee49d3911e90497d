# io/search_logging.py
import json
import logging
import sys

from route_planner.domain.entities.geography import Node
from route_planner.io.recorder import Recorder
from route_planner.io.route_events import event_from_result
from route_planner.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def default_json_logger(name="route_planner", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for a search session, plus route events for the recorder.
    Expansion logs are DEBUG only and sampled every `sample_every` expansions.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _node(n: Node) -> dict:
        return {"id": n.id, "x": n.x, "y": n.y}

    # ------------- session lifecycle ----------------

    def search_start(self, *, start: Node, goal: Node):
        self._emit("INFO", "search_start", start=self._node(start), goal=self._node(goal))

    def expand(self, node: Node, *, g, h, open_size, expanded):
        if self.debug and (expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG", "expand", node_id=node.id, g=g, h=h, open_size=open_size, expanded=expanded
            )

    def search_end(self, *, status, expanded, path_nodes, distance_m, wall_ms):
        level = "INFO" if status == "found" else "WARNING"
        self._emit(
            level,
            "search_end",
            status=status,
            expanded=expanded,
            path_nodes=path_nodes,
            distance_m=distance_m,
            wall_ms=wall_ms,
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "search_error", reason=reason, **kw)

    # ------------- route reporting ------------------

    def route(self, result):
        if self.recorder:
            self.recorder.emit(event_from_result(result, run_id=self.run_id))
