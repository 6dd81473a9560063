"""
scheduler.py — Timers on simulated time.

The simulation never touches wall-clock timers. Everything that used to be
"do this in N ms" becomes a ScheduledEvent in an EventQueue that the tick
loop drains after advancing its own clock.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledEvent:
    due_ms: float
    seq: int
    name: str = field(compare=False)
    callback: Callable[..., Any] = field(compare=False, repr=False)
    args: tuple = field(default=(), compare=False, repr=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class EventQueue:
    """Min-heap of ScheduledEvents ordered by due time, then insertion."""

    def __init__(self):
        self._heap: list[ScheduledEvent] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return sum(1 for e in self._heap if not e.cancelled)

    def schedule(self, due_ms: float, name: str,
                 callback: Callable[..., Any], *args) -> ScheduledEvent:
        event = ScheduledEvent(due_ms, next(self._counter), name, callback, args)
        heapq.heappush(self._heap, event)
        return event

    def pending(self, name: str) -> list[ScheduledEvent]:
        return sorted(e for e in self._heap if e.name == name and not e.cancelled)

    def run_due(self, now_ms: float) -> int:
        """
        Fire every event due at or before `now_ms`, in order.
        Callbacks may schedule further events; those also fire if already due.
        Returns the number of events fired.
        """
        fired = 0
        while self._heap and self._heap[0].due_ms <= now_ms:
            event = heapq.heappop(self._heap)
            if event.cancelled:
                continue
            logger.debug("firing %s at %.0f ms", event.name, now_ms)
            event.callback(*event.args)
            fired += 1
        return fired

    def clear(self) -> None:
        for event in self._heap:
            event.cancel()
        self._heap.clear()
