"""
Event bus for Endless Runner.

Provides pub/sub messaging between the window, the input mapper
and the tick driver. Dispatch is synchronous: handlers run on the
caller's thread, inside the current frame.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    ACTIVATE = auto()          # pointer down, touch start, action key
    START_REQUESTED = auto()   # start/restart button
    SHARE_REQUESTED = auto()   # share button

    # Lifecycle events
    STATE_CHANGED = auto()
    NEW_BEST = auto()
    SHARE_COMPLETED = auto()

    # System events
    TICK = auto()  # Frame tick
    RESIZE = auto()
    QUIT = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created (seconds, monotonic clock)
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Events can be emitted immediately or queued and drained
    once per frame with process_queue(). The window queues input
    events so they are handled at the start of the next Update.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._queue: deque[Event] = deque()
        self._event_history: deque[Event] = deque(maxlen=history_limit)

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event immediately."""
        self._event_history.append(event)
        self._dispatch(event)

    def queue_event(self, event: Event) -> None:
        """Queue an event for later processing."""
        self._queue.append(event)

    def process_queue(self) -> int:
        """Dispatch all queued events. Returns how many were processed."""
        processed = 0
        while self._queue:
            self.emit(self._queue.popleft())
            processed += 1
        return processed

    def _dispatch(self, event: Event) -> None:
        handlers = list(self._handlers.get(event.type, []))

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.name}: {e}")

    def get_history(self, event_type: EventType | None = None, limit: int = 10) -> list[Event]:
        """Get recent events from history."""
        history = list(self._event_history)
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]


# Convenience functions for creating common events
def activate_event(timestamp_ms: float, source: str = "input") -> Event:
    """Create an activation event (tap, click or action key)."""
    return Event(EventType.ACTIVATE, data={"timestamp_ms": timestamp_ms}, source=source)

