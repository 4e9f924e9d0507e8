"""
Read-only view of a game, handed to renderers once per tick.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple

from .geometry import Direction, Position
from .state import GameState


@dataclass(frozen=True)
class GameSnapshot:
    width: int
    height: int
    segments: Tuple[Position, ...]
    food: Position
    obstacles: FrozenSet[Position] = field(default_factory=frozenset)
    score: int = 0
    level: int = 1
    record: int = 0
    direction: Direction = Direction.RIGHT
    state: GameState = GameState.RUNNING
    tick: int = 0
    points_to_next_level: int = 0
    # Set only when the record store accepted this session's score
    new_record: bool = False

    @property
    def head(self) -> Position:
        return self.segments[0]

    @property
    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def is_new_record(self) -> bool:
        return self.new_record

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "width": self.width,
            "height": self.height,
            "snake": [p.to_dict() for p in self.segments],
            "food": self.food.to_dict(),
            "obstacles": [p.to_dict() for p in sorted(self.obstacles, key=Position.as_tuple)],
            "score": self.score,
            "level": self.level,
            "record": self.record,
            "direction": self.direction.name,
            "state": self.state.value,
            "game_over": self.is_game_over,
            "tick": self.tick,
            "new_record": self.new_record,
        }
