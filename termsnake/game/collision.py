"""
Collision predicates.

Stateless functions of explicit inputs, shared by the tick update and the
placement code.
"""
from enum import Enum
from typing import Collection, Optional, Sequence

from .geometry import Position


class CollisionType(str, Enum):
    """What the head ran into."""
    WALL = "Wall"
    OBSTACLE = "Obstacle"
    SELF = "Self"


def is_out_of_bounds(position: Position, width: int, height: int) -> bool:
    return (
        position.x < 0
        or position.x >= width
        or position.y < 0
        or position.y >= height
    )


def is_valid_position(position: Position, width: int, height: int) -> bool:
    return not is_out_of_bounds(position, width, height)


def is_self_collision(position: Position, segments: Sequence[Position]) -> bool:
    """
    Check whether the next head lands on the body.

    The current head (index 0) is excluded because it vacates on the step;
    every other segment, tail included, counts.
    """
    return any(segment == position for segment in segments[1:])


def is_on_snake(position: Position, segments: Collection[Position]) -> bool:
    """Membership over all segments, head included. Used by obstacle placement."""
    return position in segments


def is_on_obstacle(position: Position, obstacles: Collection[Position]) -> bool:
    return position in obstacles


def classify_collision(
    position: Position,
    width: int,
    height: int,
    obstacles: Collection[Position],
    segments: Sequence[Position],
) -> Optional[CollisionType]:
    """
    Classify a prospective head position.

    Args:
        position: Cell the head is about to enter
        width: Grid width in cells
        height: Grid height in cells
        obstacles: Obstacle cells
        segments: Current snake body, head first

    Returns:
        The collision type (Wall, then Obstacle, then Self in priority order),
        or None if the cell is safe
    """
    if is_out_of_bounds(position, width, height):
        return CollisionType.WALL
    if is_on_obstacle(position, obstacles):
        return CollisionType.OBSTACLE
    if is_self_collision(position, segments):
        return CollisionType.SELF
    return None
