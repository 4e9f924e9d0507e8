"""
Level and difficulty progression.

Everything here is a pure function of score, level and field size. Two
values are fixed once per game from the field size (points per level and
the obstacle cap) so difficulty scales the same on small and large boards.
"""
import math

from .errors import PreconditionError

INITIAL_LEVEL = 1
BASE_SPEED_MULTIPLIER = 1.0
SPEED_INCREASE_PER_LEVEL = 0.1
MAX_SPEED_LEVEL = 20
OBSTACLE_PROGRESSION_FACTOR = 0.5

# Field-size adaptive settings
OBSTACLE_FIELD_PERCENTAGE = 0.02
MINIMUM_OBSTACLES = 5
POINTS_PER_LEVEL_FIELD_PERCENTAGE = 0.01
MINIMUM_POINTS_PER_LEVEL = 2
MAX_OBSTACLE_FIELD_SHARE = 0.25
OBSTACLE_RAMP_PER_LEVEL = 0.1


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _require_positive(value: int, name: str) -> int:
    if value <= 0:
        raise PreconditionError(f"{name} must be positive, got {value}")
    return value


def _require_not_negative(value: int, name: str) -> int:
    if value < 0:
        raise PreconditionError(f"{name} cannot be negative, got {value}")
    return value


def points_per_level_for_field(width: int, height: int) -> int:
    """Points needed per level: 1% of the field, at least 2."""
    field_size = width * height
    return max(MINIMUM_POINTS_PER_LEVEL, _round_half_up(field_size * POINTS_PER_LEVEL_FIELD_PERCENTAGE))


def max_obstacles_for_field(width: int, height: int) -> int:
    """Obstacle cap: 2% of the field, at least 5."""
    field_size = width * height
    return max(MINIMUM_OBSTACLES, _round_half_up(field_size * OBSTACLE_FIELD_PERCENTAGE))


class ProgressionService:
    """Derives level, speed and obstacle targets."""

    def calculate_level(self, score: int, points_per_level: int) -> int:
        _require_not_negative(score, "score")
        _require_positive(points_per_level, "points_per_level")
        return INITIAL_LEVEL + score // points_per_level

    def calculate_speed_multiplier(self, level: int) -> float:
        """Speed factor for a level, capped at MAX_SPEED_LEVEL."""
        _require_positive(level, "level")
        effective_level = min(level, MAX_SPEED_LEVEL)
        return BASE_SPEED_MULTIPLIER + (effective_level - 1) * SPEED_INCREASE_PER_LEVEL

    def calculate_points_to_next_level(self, score: int, points_per_level: int) -> int:
        level = self.calculate_level(score, points_per_level)
        return max(0, level * points_per_level - score)

    def calculate_optimal_obstacle_count(self, level: int, width: int, height: int) -> int:
        """
        Obstacle budget for a level on a given field.

        Grows by half the base amount per level, never beyond a quarter of
        the field.
        """
        _require_positive(level, "level")
        _require_positive(width, "width")
        _require_positive(height, "height")

        field_size = width * height
        base_obstacles = max(1, _round_half_up(field_size * OBSTACLE_FIELD_PERCENTAGE))
        level_multiplier = 1.0 + (level - 1) * OBSTACLE_PROGRESSION_FACTOR
        return int(min(base_obstacles * level_multiplier, field_size * MAX_OBSTACLE_FIELD_SHARE))

    def target_obstacle_count(self, level: int, max_count: int) -> int:
        """10% of max_count per level above the first, saturating at level 11."""
        _require_positive(level, "level")
        ratio = min(1.0, (level - 1) * OBSTACLE_RAMP_PER_LEVEL)
        return int(max_count * ratio)

    def should_add_obstacle(self, level: int, current_count: int, max_count: int) -> bool:
        _require_positive(level, "level")
        _require_not_negative(current_count, "current_count")
        _require_positive(max_count, "max_count")
        target = self.target_obstacle_count(level, max_count)
        return current_count < target and current_count < max_count
