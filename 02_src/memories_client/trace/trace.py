"""Bounded diagnostic trace of recent RPC traffic."""

import threading
from collections import deque
from typing import Protocol

from ..event_bus import EventBus, IEventBus, TopicHandler
from ..models import TraceEvent, Topic

DEFAULT_CAPACITY = 3


class IDiagnosticTrace(Protocol):
    """Fixed-capacity, ordered log of recent traffic events."""

    def record(self, event: TraceEvent) -> None:
        """Append event, evict oldest beyond capacity, notify listeners."""
        ...

    def snapshot(self) -> list[TraceEvent]:
        """Current events, oldest first. Does not mutate."""
        ...


class DiagnosticTrace:
    """Keeps the last `capacity` TraceEvents and announces every change.

    record() never awaits, so on the event loop the append/evict/notify
    sequence cannot interleave with another recorder. On other threads the
    reentrant lock is held through notification, so listeners see changes
    in insertion order and may call snapshot() from the handler.
    """

    def __init__(
        self,
        event_bus: IEventBus | None = None,
        capacity: int = DEFAULT_CAPACITY,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._capacity = capacity
        self._events: deque[TraceEvent] = deque()
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def event_bus(self) -> IEventBus:
        return self._event_bus

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def record(self, event: TraceEvent) -> None:
        """Append event, evict oldest beyond capacity, notify listeners."""
        with self._lock:
            self._events.append(event)
            while len(self._events) > self._capacity:
                self._events.popleft()

            self._event_bus.publish(
                Topic.TRACE_UPDATED,
                payload={
                    "size": len(self._events),
                    "kind": event.kind.value,
                    "timestamp": event.timestamp,
                },
                source="diagnostic_trace",
            )

    def snapshot(self) -> list[TraceEvent]:
        """Current events, oldest first. Does not mutate."""
        with self._lock:
            return list(self._events)

    def subscribe(self, handler: TopicHandler) -> None:
        """Shortcut for listening to trace changes."""
        self._event_bus.subscribe(Topic.TRACE_UPDATED, handler)

    def unsubscribe(self, handler: TopicHandler) -> None:
        self._event_bus.unsubscribe(Topic.TRACE_UPDATED, handler)
