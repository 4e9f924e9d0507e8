"""
Game error taxonomy.

Configuration and precondition errors are raised at the call that violates
them, before any state is touched. A full board is reported loudly through
BoardFullError; obstacle placement failures and rejected direction changes
are ordinary game events and never raise.
"""


class GameError(Exception):
    """Base class for all errors raised by the game core."""

    error_code: str = "GAME_000"


class InvalidConfigurationError(GameError, ValueError):
    """Board dimensions or other settings are unusable."""

    error_code = "GAME_CONFIG_001"


class PreconditionError(GameError, ValueError):
    """An argument passed across the public API is out of range."""

    error_code = "GAME_ARG_001"


class BoardFullError(GameError):
    """No free cell is left to place food on."""

    error_code = "GAME_POS_001"

    def __init__(self, width: int, height: int):
        super().__init__(f"No free cell left on the {width}x{height} board")
        self.width = width
        self.height = height


class InvalidMoveError(GameError):
    """A snake move would put two segments on the same cell."""

    error_code = "GAME_MOVE_001"


class InvalidStateTransitionError(GameError):
    """The requested transition is not allowed from the current state."""

    error_code = "GAME_STATE_001"

    def __init__(self, current, target):
        super().__init__(f"Cannot transition from {current.name} to {target.name}")
        self.current = current
        self.target = target
