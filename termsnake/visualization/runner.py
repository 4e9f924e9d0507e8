"""
Game Runner - Fixed-interval tick loop for the terminal game.

The runner owns the only thread that touches the game: it drains pending
keys, ticks the game when the interval has elapsed and redraws through a
rich Live display. Clock and sleep are injectable so the loop can be
driven deterministically in tests.
"""
import logging
import time
from typing import Callable, List, Optional

from rich.console import Console, Group, RenderableType
from rich.live import Live

from ..core.renderer_interface import RendererInterface
from ..game.errors import BoardFullError
from ..game.geometry import Direction
from ..game.snake_game import SnakeGame
from ..game.snapshot import GameSnapshot
from ..game.state import GameState
from .keyboard import Key
from .screens import game_over_screen, pause_screen, start_screen

logger = logging.getLogger(__name__)

_DIRECTION_KEYS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class GameRunner:
    """
    Drives a SnakeGame in the terminal.

    Key bindings depend on the state:
    - Running: arrows/WASD steer, P pauses, Q or Esc ends the session
    - Paused: P resumes, Q or Esc ends the session
    - Game over: R restarts, E, Q or Esc exits
    """

    def __init__(
        self,
        game: SnakeGame,
        renderer: RendererInterface,
        input_source,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        console: Optional[Console] = None,
        refresh_per_second: int = 30,
        use_emoji: bool = True,
        show_start_screen: bool = True,
    ):
        """
        Initialize the runner.

        Args:
            game: Game to drive
            renderer: Renderer for the board
            input_source: Object whose poll() returns the Keys pressed since
                the last call
            clock: Monotonic time source in seconds
            sleep: Function used to wait between loop iterations
            console: Console to draw on (a new one if omitted)
            refresh_per_second: Upper bound on input polls per second
            use_emoji: Decorate menu screens with emoji
            show_start_screen: Wait for a key on a title screen first
        """
        self.game = game
        self.renderer = renderer
        self.input_source = input_source
        self.clock = clock
        self.sleep = sleep
        self.console = console or Console()
        self.poll_interval = 1.0 / max(1, refresh_per_second)
        self.use_emoji = use_emoji
        self.show_start_screen = show_start_screen

        self.sessions_played = 0
        self._exit_requested = False
        self._next_tick_at = 0.0
        self._live: Optional[Live] = None
        self._last_frame: Optional[GameSnapshot] = None

    def tick_interval(self) -> float:
        """Seconds between ticks at the game's current level."""
        base = self.game.config.tick_interval_ms / 1000.0
        return base / self.game.get_speed_multiplier()

    def run(self) -> int:
        """
        Play until the player exits.

        Returns:
            Score of the last session
        """
        logger.info("Runner started")
        with Live(
            console=self.console,
            auto_refresh=False,
            transient=False,
        ) as live:
            self._live = live
            if self.show_start_screen:
                self._show(start_screen(self.game.get_record_score(), self.use_emoji))
                self._wait_for_any_key()

            if not self._exit_requested:
                self.sessions_played = 1
                self._schedule_next_tick()
            while not self._exit_requested:
                self.step()
                self._redraw()
                self._idle()
            self._live = None

        logger.info("Runner stopped after %d session(s)", self.sessions_played)
        return self.game.get_score()

    def step(self):
        """Handle pending input, then tick if the interval has elapsed."""
        for key in self.input_source.poll():
            self.handle_key(key)
            if self._exit_requested:
                return

        if self.game.state is not GameState.RUNNING:
            return

        now = self.clock()
        if now < self._next_tick_at:
            return

        try:
            self.game.tick()
        except BoardFullError as e:
            logger.info("%s; ending session", e)
            self.game.quit()
        self._next_tick_at = now + self.tick_interval()

    def handle_key(self, key: Key):
        state = self.game.state

        if state is GameState.RUNNING:
            if key in _DIRECTION_KEYS:
                self.game.change_direction(_DIRECTION_KEYS[key])
            elif key is Key.PAUSE:
                self.game.pause()
            elif key in (Key.QUIT, Key.EXIT):
                self.game.quit()

        elif state is GameState.PAUSED:
            if key is Key.PAUSE:
                self.game.resume()
                self._schedule_next_tick()
            elif key in (Key.QUIT, Key.EXIT):
                self.game.quit()

        elif state is GameState.GAME_OVER:
            if key is Key.RESTART:
                self.game.restart()
                self.sessions_played += 1
                self._schedule_next_tick()
            elif key in (Key.EXIT, Key.QUIT):
                self._exit_requested = True

    def view(self) -> RenderableType:
        """Compose the frame for the current state."""
        snapshot = self.game.snapshot()
        board = self.renderer.render(snapshot)
        if snapshot.state is GameState.PAUSED:
            return Group(board, pause_screen(snapshot))
        if snapshot.state is GameState.GAME_OVER:
            return Group(board, game_over_screen(snapshot, self.use_emoji))
        return board

    def _schedule_next_tick(self):
        self._next_tick_at = self.clock() + self.tick_interval()

    def _wait_for_any_key(self):
        keys: List[Key] = []
        while not keys:
            keys = self.input_source.poll()
            if not keys:
                self.sleep(self.poll_interval)
        if Key.EXIT in keys:
            self._exit_requested = True

    def _idle(self):
        if self._exit_requested:
            return
        delay = self.poll_interval
        if self.game.state is GameState.RUNNING:
            delay = min(delay, self._next_tick_at - self.clock())
        self.sleep(max(0.0, delay))

    def _redraw(self):
        snapshot = self.game.snapshot()
        if snapshot == self._last_frame:
            return
        self._last_frame = snapshot
        self._show(self.view())

    def _show(self, renderable: RenderableType):
        if self._live is not None:
            self._live.update(renderable, refresh=True)
