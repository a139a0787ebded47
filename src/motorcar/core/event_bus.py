"""Synchronous publish/subscribe bus for car events.

Parts of the car publish events (engine started, fuel exhausted, gear
changed) without knowing who listens. Handlers run immediately, in
priority order.

Typical usage example:
    from motorcar.core.event_bus import EventBus
    from motorcar.systems.events import FuelExhaustedEvent

    bus = EventBus()
    bus.subscribe(FuelExhaustedEvent, on_empty_tank)
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventPriority(Enum):
    """Handler priority, CRITICAL runs first and LOW last."""

    CRITICAL = auto()
    HIGH = auto()
    NORMAL = auto()
    LOW = auto()


@dataclass
class Event:
    """Base class for all events.

    Attributes:
        timestamp: Wall-clock time the event was created.
    """

    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Any], None]


class EventBus:
    """Dispatches events to handlers subscribed by event type.

    Dispatch is by exact type: a handler subscribed to ``Event`` does not
    receive subclasses.

    Examples:
        >>> from motorcar.systems.events import GearChangedEvent
        >>> from motorcar.systems.transmission import Gear
        >>> bus = EventBus()
        >>> bus.subscribe(GearChangedEvent, lambda e: print(e.new_gear))
        >>> bus.publish(GearChangedEvent(old_gear=Gear.PARK, new_gear=Gear.DRIVE))
        Gear.DRIVE
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[tuple[Handler, EventPriority]]] = {}

    def subscribe(
        self,
        event_type: type[Event],
        handler: Handler,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Register a handler for an event type.

        Handlers with equal priority run in subscription order.
        """
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append((handler, priority))
        # list.sort is stable, so equal priorities keep subscription order
        handlers.sort(key=lambda entry: entry[1].value)

    def unsubscribe(self, event_type: type[Event], handler: Handler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        if event_type not in self._handlers:
            return

        remaining = [(h, p) for h, p in self._handlers[event_type] if h != handler]
        if remaining:
            self._handlers[event_type] = remaining
        else:
            del self._handlers[event_type]

    def publish(self, event: Event) -> None:
        """Call every handler for the event's type.

        Exceptions raised by a handler propagate to the publisher.
        """
        for handler, _ in list(self._handlers.get(type(event), [])):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()

    def get_subscriber_count(self, event_type: type[Event]) -> int:
        return len(self._handlers.get(event_type, []))
