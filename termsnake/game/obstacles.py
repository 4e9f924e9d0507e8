"""
Obstacle placement by rejection sampling.
"""
import logging
import random
from typing import Collection, FrozenSet, Optional, Set

from .collision import is_on_obstacle, is_on_snake
from .errors import PreconditionError
from .geometry import Position

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 50
DEFAULT_MIN_DISTANCE = 3


class ObstacleManager:
    """
    Owns the obstacle set for one game.

    Obstacles only accumulate during a run; clear() is called on reset.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise PreconditionError("max_attempts must be positive")
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self._obstacles: Set[Position] = set()
        self.last_added: Optional[Position] = None

    @property
    def obstacles(self) -> FrozenSet[Position]:
        return frozenset(self._obstacles)

    @property
    def count(self) -> int:
        return len(self._obstacles)

    def contains(self, position: Position) -> bool:
        return position in self._obstacles

    def add(self, position: Position) -> None:
        """Place an obstacle at an explicit cell."""
        if position in self._obstacles:
            raise PreconditionError(f"Obstacle already at {position}")
        self._obstacles.add(position)
        self.last_added = position

    def clear(self) -> None:
        self._obstacles.clear()
        self.last_added = None

    def try_add_obstacle(
        self,
        head: Position,
        snake: Collection[Position],
        food: Optional[Position],
        width: int,
        height: int,
        min_distance: int = DEFAULT_MIN_DISTANCE,
    ) -> bool:
        """
        Try to drop one obstacle on a random free cell.

        Candidates closer than `min_distance` (Chebyshev) to the head, or on
        the snake, the food or another obstacle are rejected and resampled,
        up to max_attempts draws.

        Args:
            head: Current head position
            snake: All snake segments
            food: Current food cell
            width: Grid width in cells
            height: Grid height in cells
            min_distance: Minimum Chebyshev distance from the head

        Returns:
            True if an obstacle was placed, False if the attempt budget ran out
        """
        occupied = set(snake)
        for _ in range(self.max_attempts):
            candidate = Position(self.rng.randrange(width), self.rng.randrange(height))

            if head.chebyshev_distance(candidate) < min_distance:
                continue
            if is_on_snake(candidate, occupied) or candidate == food or is_on_obstacle(candidate, self._obstacles):
                continue

            self._obstacles.add(candidate)
            self.last_added = candidate
            return True

        logger.debug("No obstacle cell found after %d attempts", self.max_attempts)
        return False
