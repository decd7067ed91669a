"""EventBus implementation for in-process change notifications."""

import uuid
from datetime import datetime, timezone
from typing import Callable, Protocol

from ..logging_config import get_logger
from ..models import BusMessage, Topic

logger = get_logger(__name__)


TopicHandler = Callable[[BusMessage], None]


class IEventBus(Protocol):
    """In-memory pub/sub for exchanging BusMessages."""

    def subscribe(self, topic: Topic, handler: TopicHandler) -> None:
        """Subscribe a handler to a topic."""
        ...

    def unsubscribe(self, topic: Topic, handler: TopicHandler) -> None:
        """Remove a previously subscribed handler."""
        ...

    def publish(self, topic: Topic, payload: dict, source: str) -> BusMessage:
        """Deliver a BusMessage to every subscriber of its topic."""
        ...


class EventBus:
    """In-memory pub/sub event bus.

    Delivery is synchronous so publishing never introduces a suspension
    point: callers such as DiagnosticTrace.record stay atomic on the event
    loop. Handlers that need I/O should schedule their own task.
    """

    def __init__(self):
        self._subscribers: dict[Topic, list[TopicHandler]] = {
            topic: [] for topic in Topic
        }

    def subscribe(self, topic: Topic, handler: TopicHandler) -> None:
        """Subscribe a handler to a topic."""
        self._subscribers[topic].append(handler)

    def unsubscribe(self, topic: Topic, handler: TopicHandler) -> None:
        """Remove a previously subscribed handler."""
        try:
            self._subscribers[topic].remove(handler)
        except ValueError:
            logger.debug("Handler not subscribed to %s", topic.value)

    def publish(self, topic: Topic, payload: dict, source: str) -> BusMessage:
        """Deliver a BusMessage to every subscriber of its topic."""
        message = BusMessage(
            id=str(uuid.uuid4()),
            topic=topic,
            payload=payload,
            source=source,
            timestamp=datetime.now(timezone.utc),
        )

        # Copy so handlers may unsubscribe while being called
        for handler in list(self._subscribers.get(topic, [])):
            try:
                handler(message)
            except Exception as e:
                logger.error("Error in %s handler %r: %s", topic.value, handler, e)

        return message
