"""
Abstract game interface for termsnake.

The terminal runner and renderers talk to the game only through this
interface and the snapshots it hands out.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version


class GameInterface(ABC):
    """
    Abstract base class for turn-based grid games.

    Games own their state and mutate it only through these operations.
    Callers read state through snapshot() or get_state().
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Re-initialize the board and enter the running state."""
        pass

    @abstractmethod
    def tick(self) -> None:
        """
        Advance the simulation by one step.

        Does nothing unless the game is running.
        """
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """
        Get an immutable copy of the current state for rendering.

        Returns:
            A snapshot object that shares no mutable state with the game
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state as plain data.

        Returns:
            Dictionary containing all state needed for rendering or logging
        """
        pass

    @abstractmethod
    def is_game_over(self) -> bool:
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
