"""
Core abstractions for termsnake.

Provides abstract interfaces that the game, its renderers and record stores implement.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface
from .record_interface import RecordStoreInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
    'RecordStoreInterface',
]
