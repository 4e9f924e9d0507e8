"""
Food placement.
"""
import random
from typing import Collection, Iterable, Optional

from .errors import BoardFullError
from .geometry import Position


class FoodGenerator:
    """Picks a free cell uniformly at random."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate_food(
        self,
        occupied: Collection[Position],
        width: int,
        height: int,
    ) -> Position:
        """
        Choose a cell that is not in `occupied`.

        Args:
            occupied: Cells food must not land on
            width: Grid width in cells
            height: Grid height in cells

        Returns:
            The chosen cell

        Raises:
            BoardFullError: If every cell is occupied
        """
        blocked = set(occupied)
        free = [
            Position(x, y)
            for x in range(width)
            for y in range(height)
            if Position(x, y) not in blocked
        ]
        if not free:
            raise BoardFullError(width, height)
        return self.rng.choice(free)

    def generate_food_with_tail_allowed(
        self,
        snake_without_tail: Iterable[Position],
        obstacles: Iterable[Position],
        width: int,
        height: int,
    ) -> Position:
        """
        Like generate_food, but the tail cell is a legal target.

        The caller passes the body with its tail already dropped: the tail
        vacates before the head could get there.
        """
        occupied = set(snake_without_tail)
        occupied.update(obstacles)
        return self.generate_food(occupied, width, height)
