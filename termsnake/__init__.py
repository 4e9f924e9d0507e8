"""
termsnake - Snake in the terminal.

Modules:
- core: Abstract interfaces for games, renderers and record stores
- game: Snake game state engine (board, progression, state machine, events)
- persistence: High-score record stores
- visualization: Rich renderer, menu screens, keyboard input and tick loop
- utils: Configuration and logging setup
"""

__version__ = "1.0.0"
