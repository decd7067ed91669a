"""Tracing and observability data models."""

import time
from dataclasses import asdict, dataclass
from enum import Enum


class TraceKind(str, Enum):
    """Kind of traffic event."""

    REQUEST = "request"
    RESPONSE = "response"
    ERROR = "error"


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class TraceEvent:
    """A single traffic event kept in the diagnostic trace."""

    kind: TraceKind
    url: str
    timestamp: int  # ms since epoch
    method: str | None = None  # only set on requests
    status: int | None = None
    message: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data
