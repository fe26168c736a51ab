import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class ProgressKind(str, Enum):
    COMBINE = "combine"
    UPGRADE = "upgrade"


@dataclass(frozen=True)
class ProgressEvent:
    kind: ProgressKind
    count: int = 1


Subscriber = Callable[[ProgressEvent], None]


class EventBus:
    """Minimal synchronous pub/sub bus for progress events.

    Quest and achievement trackers subscribe here; the engine never calls
    back into them directly.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[ProgressKind, List[Subscriber]] = {}

    def subscribe(self, kind: ProgressKind, callback: Subscriber) -> None:
        logger.debug("Subscribing to event '%s': %s", kind.value, callback)
        self._subscribers.setdefault(kind, []).append(callback)

    def unsubscribe(self, kind: ProgressKind, callback: Subscriber) -> None:
        callbacks = self._subscribers.get(kind, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def publish(self, event: ProgressEvent) -> None:
        subscribers = list(self._subscribers.get(event.kind, []))
        logger.debug("Publishing event '%s' to %d subscribers", event.kind.value, len(subscribers))
        for cb in subscribers:
            try:
                cb(event)
            except Exception as exc:
                logger.exception("Error in event subscriber for '%s': %s", event.kind.value, exc)
