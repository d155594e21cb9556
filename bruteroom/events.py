"""Global event system for decoupling status notifications from the controller.

This event bus is designed for feedback and cross-system notifications only.
It uses a global instance so the character controller does not need to know
who is listening (window title, logging, tests).

USE FOR:
- Announcing that an action started or ended
- Announcing facing changes
- Status display that several systems care about

DO NOT USE FOR:
- The state machine's own transitions (timers, rotation, clip selection)
- Per-frame data such as transforms (the camera reads those directly)
- Operations that need immediate return values or synchronous confirmation
- Error handling or exception propagation

The event bus is fire-and-forget: publish an event without expecting return values
or confirmations. All handlers execute immediately (synchronously).
"""

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import Literal, TypeAlias

from bruteroom.character.enums import ActionKind, FacingDirection

logger = logging.getLogger(__name__)

ActionEndReason: TypeAlias = Literal["stopped", "completed"]


@dataclass
class GameEvent:
    """Base class for all game events."""

    pass


@dataclass
class ActionStartedEvent(GameEvent):
    """The character began a new action."""

    action: ActionKind
    facing: FacingDirection


@dataclass
class ActionEndedEvent(GameEvent):
    """The character left an action and is back to Idle.

    Attributes:
        action: The action that ended.
        reason: "stopped" when a stop edge cut it short, "completed" when a
            bounded action ran its full length.
    """

    action: ActionKind
    reason: ActionEndReason


@dataclass
class FacingChangedEvent(GameEvent):
    """The character's cardinal facing changed (at the start of a turn)."""

    previous: FacingDirection
    facing: FacingDirection


class EventBus:
    """Simple event bus for publish/subscribe pattern."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers:
            with suppress(ValueError):
                self._handlers[event_type].remove(handler)

    def publish(self, event: GameEvent) -> None:
        """Publish an event to all subscribed handlers."""
        event_type = type(event)
        # Copy the handler list to allow safe subscribe/unsubscribe during dispatch
        for handler in list(self._handlers.get(event_type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error handling event {event_type.__name__}")


# Global event bus instance
_global_event_bus = EventBus()


def subscribe_to_event(event_type: type, handler: Callable) -> None:
    """Subscribe to an event type globally."""
    _global_event_bus.subscribe(event_type, handler)


def unsubscribe_from_event(event_type: type, handler: Callable) -> None:
    """Unsubscribe from an event type globally."""
    _global_event_bus.unsubscribe(event_type, handler)


def publish_event(event: GameEvent) -> None:
    """Publish an event globally."""
    _global_event_bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Reset the global event bus. Use only in tests."""
    global _global_event_bus
    _global_event_bus = EventBus()
