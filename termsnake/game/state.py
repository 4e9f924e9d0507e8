"""
Game state tags and the allowed transitions between them.
"""
from enum import Enum
from typing import Dict, FrozenSet


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


TRANSITIONS: Dict[GameState, FrozenSet[GameState]] = {
    GameState.RUNNING: frozenset({GameState.PAUSED, GameState.GAME_OVER}),
    GameState.PAUSED: frozenset({GameState.RUNNING, GameState.GAME_OVER}),
    # Restart re-initializes the board before entering RUNNING
    GameState.GAME_OVER: frozenset({GameState.RUNNING}),
}


def can_transition(current: GameState, target: GameState) -> bool:
    return target in TRANSITIONS[current]
