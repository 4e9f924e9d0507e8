"""
Grid geometry: positions, headings and distances.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import PreconditionError


class Direction(Enum):
    """Snake heading as a unit vector (dx, dy). Screen y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_moving(self) -> bool:
        return self is not Direction.NONE

    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Direction":
        """
        Resolve a (dx, dy) vector to a Direction.

        Raises:
            PreconditionError: If the vector is not a unit step or zero
        """
        try:
            return cls((dx, dy))
        except ValueError:
            raise PreconditionError(f"({dx}, {dy}) is not a valid direction") from None


@dataclass(frozen=True)
class Position:
    """A cell on the game grid."""
    x: int
    y: int

    def __add__(self, other):
        if isinstance(other, Direction):
            return Position(self.x + other.dx, self.y + other.dy)
        if isinstance(other, tuple) and len(other) == 2:
            return Position(self.x + other[0], self.y + other[1])
        return NotImplemented

    def chebyshev_distance(self, other: "Position") -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "Position":
        return cls(int(data["x"]), int(data["y"]))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def grid_center(width: int, height: int) -> Position:
    """Cell the snake head spawns on."""
    return Position(width // 2, height // 2)
