"""EventBus envelope models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Topic(str, Enum):
    """EventBus topics."""

    TRACE_UPDATED = "trace_updated"
    UPLOAD_PHASE = "upload_phase"


@dataclass
class BusMessage:
    """A notification exchanged through EventBus."""

    id: str
    topic: Topic
    payload: dict  # varies by topic
    source: str  # component that published
    timestamp: datetime
