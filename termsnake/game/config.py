"""
Snake game configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional

from .errors import InvalidConfigurationError
from .progression import max_obstacles_for_field, points_per_level_for_field

MIN_BOARD_SIZE = 5

_INT_FIELDS = ("width", "height", "initial_length", "obstacle_min_distance", "obstacle_max_attempts")
_OPTIONAL_INT_FIELDS = ("points_per_level", "max_obstacles", "seed")


def _require_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a sensible size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")


class Difficulty(Enum):
    """Base milliseconds between ticks."""
    EASY = 200
    NORMAL = 150
    HARD = 100
    EXPERT = 50

    @classmethod
    def parse(cls, value: Any) -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise InvalidConfigurationError(f"Unknown difficulty: {value!r}") from None


@dataclass
class SnakeConfig:
    """Configuration for Snake game."""

    # Grid dimensions
    width: int = 20
    height: int = 10

    initial_length: int = 3

    # None = derive from field size
    points_per_level: Optional[int] = None
    max_obstacles: Optional[int] = None

    obstacle_min_distance: int = 3
    obstacle_max_attempts: int = 50

    difficulty: Difficulty = Difficulty.NORMAL
    seed: Optional[int] = None

    def __post_init__(self):
        self.difficulty = Difficulty.parse(self.difficulty)

    @property
    def field_size(self) -> int:
        return self.width * self.height

    @property
    def tick_interval_ms(self) -> int:
        return self.difficulty.value

    def resolved_points_per_level(self) -> int:
        if self.points_per_level is not None:
            return self.points_per_level
        return points_per_level_for_field(self.width, self.height)

    def resolved_max_obstacles(self) -> int:
        if self.max_obstacles is not None:
            return self.max_obstacles
        return max_obstacles_for_field(self.width, self.height)

    def validate(self) -> None:
        """
        Reject unusable settings.

        Raises:
            InvalidConfigurationError: On the first invalid value found
        """
        for name in _INT_FIELDS:
            _require_int(name, getattr(self, name))
        for name in _OPTIONAL_INT_FIELDS:
            if getattr(self, name) is not None:
                _require_int(name, getattr(self, name))

        if self.width < MIN_BOARD_SIZE or self.height < MIN_BOARD_SIZE:
            raise InvalidConfigurationError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, "
                f"got {self.width}x{self.height}"
            )
        # The body extends left from the centre column
        if not 1 <= self.initial_length <= self.width // 2 + 1:
            raise InvalidConfigurationError(
                f"initial_length must be between 1 and {self.width // 2 + 1}, "
                f"got {self.initial_length}"
            )
        if self.resolved_points_per_level() < 1:
            raise InvalidConfigurationError("points_per_level must be positive")
        if self.resolved_max_obstacles() < 1:
            raise InvalidConfigurationError("max_obstacles must be positive")
        if self.obstacle_min_distance < 0:
            raise InvalidConfigurationError("obstacle_min_distance cannot be negative")
        if self.obstacle_max_attempts < 1:
            raise InvalidConfigurationError("obstacle_max_attempts must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "initial_length": self.initial_length,
            "points_per_level": self.points_per_level,
            "max_obstacles": self.max_obstacles,
            "obstacle_min_distance": self.obstacle_min_distance,
            "obstacle_max_attempts": self.obstacle_max_attempts,
            "difficulty": self.difficulty.name.lower(),
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary."""
        return cls(
            width=data.get("width", 20),
            height=data.get("height", 10),
            initial_length=data.get("initial_length", 3),
            points_per_level=data.get("points_per_level"),
            max_obstacles=data.get("max_obstacles"),
            obstacle_min_distance=data.get("obstacle_min_distance", 3),
            obstacle_max_attempts=data.get("obstacle_max_attempts", 50),
            difficulty=data.get("difficulty", "normal"),
            seed=data.get("seed"),
        )
