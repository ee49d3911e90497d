# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol, TextIO

from route_planner.io.route_events import RouteEvent

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev: RouteEvent) -> None: ...


class JsonlSink:
    """
    One compact JSON line per route event.

    With no fp the current sys.stdout is looked up on every write, so the sink
    follows stream redirection. The JSON log handler shares that stream, so each
    line is flushed as soon as it is written to keep the two from interleaving.
    """

    def __init__(self, fp: TextIO | None = None):
        self.fp = fp

    def write(self, ev: RouteEvent) -> None:
        fp = self.fp if self.fp is not None else sys.stdout
        fp.write(json.dumps(asdict(ev), separators=(",", ":")) + "\n")
        fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list[RouteEvent] = []

    def write(self, ev: RouteEvent) -> None:
        self.events.append(ev)

    def of_type(self, cls: type[RouteEvent]) -> list[RouteEvent]:
        return [ev for ev in self.events if isinstance(ev, cls)]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev: RouteEvent) -> None:
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # a broken sink must not fail the route request
                log.exception("sink %s failed to write %s", type(s).__name__, type(ev).__name__)
