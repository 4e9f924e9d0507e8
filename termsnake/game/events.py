"""
Game notifications and the event bus that delivers them.

Notifications are plain frozen dataclasses. The bus calls handlers
synchronously, in subscription order, at the point in the tick where the
event happens. Handlers must return quickly; anything heavy belongs on
another thread.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, DefaultDict, List, Type

from .collision import CollisionType
from .geometry import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameEvent:
    """Base class for all notifications."""


@dataclass(frozen=True)
class GameStarted(GameEvent):
    width: int
    height: int


@dataclass(frozen=True)
class FoodEaten(GameEvent):
    position: Position
    new_score: int


@dataclass(frozen=True)
class ScoreChanged(GameEvent):
    score: int


@dataclass(frozen=True)
class LevelUp(GameEvent):
    new_level: int


@dataclass(frozen=True)
class Collision(GameEvent):
    position: Position
    collision_type: CollisionType


@dataclass(frozen=True)
class GameOver(GameEvent):
    pass


@dataclass(frozen=True)
class DirectionChanged(GameEvent):
    dx: int
    dy: int


@dataclass(frozen=True)
class ObstacleAdded(GameEvent):
    position: Position


@dataclass(frozen=True)
class GamePaused(GameEvent):
    pass


@dataclass(frozen=True)
class GameResumed(GameEvent):
    pass


@dataclass(frozen=True)
class NewRecordSet(GameEvent):
    record: int


Handler = Callable[[GameEvent], None]


class EventBus:
    """Type-keyed synchronous publish/subscribe."""

    def __init__(self):
        self._handlers: DefaultDict[Type[GameEvent], List[Handler]] = defaultdict(list)
        self._catch_all: List[Handler] = []

    def subscribe(self, event_type: Type[GameEvent], handler: Handler) -> Callable[[], None]:
        """
        Register a handler for one event type (subclasses included).

        Returns:
            A callable that removes the subscription
        """
        self._handlers[event_type].append(handler)

        def unsubscribe():
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Register a handler that sees every event."""
        self._catch_all.append(handler)

        def unsubscribe():
            if handler in self._catch_all:
                self._catch_all.remove(handler)

        return unsubscribe

    def publish(self, event: GameEvent) -> None:
        handlers: List[Handler] = []
        for event_type in type(event).__mro__:
            handlers.extend(self._handlers.get(event_type, ()))
        handlers.extend(self._catch_all)

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                # A broken observer must not abort the tick
                logger.exception("Event handler %r failed on %s", handler, type(event).__name__)
