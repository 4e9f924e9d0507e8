"""
Abstract renderer interface for termsnake.

Renderers turn a game snapshot into something a rich Console can print.
"""

from abc import ABC, abstractmethod
from typing import Any

from rich.console import RenderableType


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Implementations are swappable (emoji tiles, plain ASCII) and never touch
    the game itself, only the snapshot they are given.
    """

    @abstractmethod
    def render(self, snapshot: Any) -> RenderableType:
        """
        Render a game snapshot.

        Args:
            snapshot: Immutable state from GameInterface.snapshot()

        Returns:
            A rich renderable for the whole game view
        """
        pass
