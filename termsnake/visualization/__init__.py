"""
Terminal presentation for termsnake: rich renderer, menu screens,
keyboard input and the tick loop.
"""

from .keyboard import Key, KeyboardInput, decode_key
from .renderer import TerminalRenderer, ASCII_TILES, EMOJI_TILES
from .runner import GameRunner

__all__ = [
    'Key',
    'KeyboardInput',
    'decode_key',
    'TerminalRenderer',
    'ASCII_TILES',
    'EMOJI_TILES',
    'GameRunner',
]
