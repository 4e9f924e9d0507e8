"""
Snake game core for termsnake.

Pure game state engine: grid geometry, snake body, placement, collisions,
progression and the Running/Paused/GameOver state machine.
"""

from .collision import CollisionType
from .config import Difficulty, SnakeConfig
from .errors import (
    BoardFullError,
    GameError,
    InvalidConfigurationError,
    InvalidMoveError,
    InvalidStateTransitionError,
    PreconditionError,
)
from .events import EventBus
from .geometry import Direction, Position
from .snake_game import SnakeGame
from .snapshot import GameSnapshot
from .state import GameState

__all__ = [
    'SnakeGame',
    'SnakeConfig',
    'Difficulty',
    'GameSnapshot',
    'GameState',
    'Direction',
    'Position',
    'CollisionType',
    'EventBus',
    'GameError',
    'BoardFullError',
    'InvalidConfigurationError',
    'InvalidMoveError',
    'InvalidStateTransitionError',
    'PreconditionError',
]
