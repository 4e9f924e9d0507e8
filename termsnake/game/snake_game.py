"""
Snake Game Core - Pure game logic without rendering.

SnakeGame owns the board (snake, food, obstacles), the score and level, and
the Running/Paused/GameOver state. It is driven from outside: a scheduler
calls tick() at a fixed interval and an input source calls
change_direction() in between. Nothing here blocks, sleeps or renders.
"""
import logging
import random
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from ..core.game_interface import GameInterface, GameMetadata
from ..core.record_interface import RecordStoreInterface
from .collision import classify_collision, is_out_of_bounds
from .config import SnakeConfig
from .errors import BoardFullError, InvalidStateTransitionError, PreconditionError
from .events import (
    Collision,
    DirectionChanged,
    EventBus,
    FoodEaten,
    GameOver,
    GamePaused,
    GameResumed,
    GameStarted,
    LevelUp,
    NewRecordSet,
    ObstacleAdded,
    ScoreChanged,
)
from .food import FoodGenerator
from .geometry import Direction, Position, grid_center
from .obstacles import ObstacleManager
from .progression import INITIAL_LEVEL, ProgressionService
from .snake_body import SnakeBody
from .snapshot import GameSnapshot
from .state import GameState, can_transition

logger = logging.getLogger(__name__)

DirectionRequest = Union[Direction, Tuple[int, int]]


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake moves one cell per tick on a bounded grid. Eating food grows
    it and scores a point; every few points the level goes up and obstacles
    start to appear. Running into a wall, an obstacle or its own body ends
    the game.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about the Snake game."""
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat food, grow longer, avoid walls, obstacles and yourself",
        )

    def __init__(
        self,
        config: Optional[SnakeConfig] = None,
        record_store: Optional[RecordStoreInterface] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Create a game and start its first session.

        Args:
            config: Game settings (defaults to a 20x10 board)
            record_store: Where the high score lives; None keeps no record
            event_bus: Bus to publish notifications on; a private one is
                created if omitted
            rng: Random source for food and obstacles (defaults to one seeded
                from config.seed)

        Raises:
            InvalidConfigurationError: If the configuration is unusable
        """
        self.config = config or SnakeConfig()
        self.config.validate()

        self.width = self.config.width
        self.height = self.config.height
        self.points_per_level = self.config.resolved_points_per_level()
        self.max_obstacles = self.config.resolved_max_obstacles()

        self.rng = rng or random.Random(self.config.seed)
        self.events = event_bus or EventBus()
        self.record_store = record_store

        self.progression = ProgressionService()
        self.snake = SnakeBody()
        self.food_generator = FoodGenerator(self.rng)
        self.obstacle_manager = ObstacleManager(self.rng, self.config.obstacle_max_attempts)

        # Game state (initialized in reset)
        self.state: GameState = GameState.RUNNING
        self.food: Position = Position(0, 0)
        self.score: int = 0
        self.level: int = INITIAL_LEVEL
        self.tick_count: int = 0
        self._direction: Direction = Direction.RIGHT
        self._pending_direction: Direction = Direction.RIGHT
        self._record: int = 0
        self._session_finalized: bool = False
        self._new_record: bool = False

        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Re-initialize everything and enter RUNNING.

        The snake is re-seeded at the board centre heading right, obstacles
        are cleared, food is placed, score and level go back to their start
        values.
        """
        self.snake.initialize(grid_center(self.width, self.height), self.config.initial_length)
        self._direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self.obstacle_manager.clear()
        self.score = 0
        self.level = INITIAL_LEVEL
        self.tick_count = 0
        self.food = self.food_generator.generate_food(
            set(self.snake.segments) | self.obstacle_manager.obstacles,
            self.width,
            self.height,
        )
        self._record = self.record_store.load_record_score() if self.record_store else 0
        self._session_finalized = False
        self._new_record = False
        self.state = GameState.RUNNING

        logger.info("Game started on %dx%d board", self.width, self.height)
        self.events.publish(GameStarted(self.width, self.height))
        self.events.publish(ScoreChanged(self.score))

    def restart(self) -> None:
        """Start a new session after a game over."""
        if self.state is not GameState.GAME_OVER:
            raise InvalidStateTransitionError(self.state, GameState.RUNNING)
        self.reset()

    def pause(self) -> None:
        self._transition(GameState.PAUSED)
        self.events.publish(GamePaused())

    def resume(self) -> None:
        if self.state is not GameState.PAUSED:
            raise InvalidStateTransitionError(self.state, GameState.RUNNING)
        self._transition(GameState.RUNNING)
        self.events.publish(GameResumed())

    def toggle_pause(self) -> None:
        if self.state is GameState.PAUSED:
            self.resume()
        else:
            self.pause()

    def quit(self) -> None:
        """End the session from RUNNING or PAUSED."""
        self._enter_game_over()

    def _transition(self, target: GameState) -> None:
        if not can_transition(self.state, target):
            raise InvalidStateTransitionError(self.state, target)
        logger.debug("State %s -> %s", self.state.name, target.name)
        self.state = target

    def _enter_game_over(self) -> None:
        self._transition(GameState.GAME_OVER)
        logger.info("Game over: score=%d level=%d ticks=%d", self.score, self.level, self.tick_count)
        self.events.publish(GameOver())
        self._finalize_session()

    def _finalize_session(self) -> None:
        if self._session_finalized:
            return
        self._session_finalized = True
        if self.record_store is None:
            return
        if self.record_store.update_record_if_higher(self.score):
            logger.info("New record: %d (previous %d)", self.score, self._record)
            self._record = self.score
            self._new_record = True
            self.events.publish(NewRecordSet(self.score))

    # ------------------------------------------------------------------
    # Per-tick update
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """
        Execute one game step.

        Only mutates the board while RUNNING. A collision ends the game and
        leaves the board as it was before the step.

        Raises:
            BoardFullError: If food was eaten and no cell is left for the
                next one; nothing is mutated in that case
        """
        if self.state is not GameState.RUNNING:
            return

        direction = self._pending_direction
        new_head = self.snake.head + direction

        collision_type = classify_collision(
            new_head,
            self.width,
            self.height,
            self.obstacle_manager.obstacles,
            self.snake.segments,
        )
        if collision_type is not None:
            self._direction = direction
            logger.debug("Collision with %s at %s", collision_type.value, new_head)
            self.events.publish(Collision(new_head, collision_type))
            self._enter_game_over()
            return

        if new_head == self.food:
            next_food = self._next_food(new_head)
            eaten = self.food
            self.snake.grow(new_head)
            self.food = next_food
            self._direction = direction
            self._add_score(1)
            self.events.publish(FoodEaten(eaten, self.score))
            self._update_level()
        else:
            self.snake.move(new_head)
            self._direction = direction

        self.tick_count += 1
        self._update_obstacles()

    def _next_food(self, new_head: Position) -> Position:
        """Pick the food cell for the board as it will be after growing."""
        grown = (new_head,) + self.snake.segments
        obstacles = self.obstacle_manager.obstacles
        try:
            return self.food_generator.generate_food(set(grown) | obstacles, self.width, self.height)
        except BoardFullError:
            # Only the tail cell may be left; it frees up on the next move
            logger.info("Board nearly full, placing food on the tail cell")
            return self.food_generator.generate_food_with_tail_allowed(
                grown[:-1], obstacles, self.width, self.height
            )

    def _update_level(self) -> None:
        new_level = self.progression.calculate_level(self.score, self.points_per_level)
        if new_level > self.level:
            self.level = new_level
            logger.info("Level up: %d", new_level)
            self.events.publish(LevelUp(new_level))

    def _update_obstacles(self) -> None:
        max_count = min(
            self.max_obstacles,
            self.progression.calculate_optimal_obstacle_count(self.level, self.width, self.height),
        )
        if not self.progression.should_add_obstacle(self.level, self.obstacle_manager.count, max_count):
            return

        placed = self.obstacle_manager.try_add_obstacle(
            self.snake.head,
            self.snake.segments,
            self.food,
            self.width,
            self.height,
            self.config.obstacle_min_distance,
        )
        if placed:
            self.events.publish(ObstacleAdded(self.obstacle_manager.last_added))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def change_direction(self, direction: DirectionRequest) -> bool:
        """
        Request a new heading for the next tick.

        The most recent accepted request before a tick wins. A request that
        points straight back along the direction the snake last moved is
        ignored, as are requests while the game is not running.

        Args:
            direction: A Direction or a (dx, dy) unit vector

        Returns:
            True if the request was accepted
        """
        if not isinstance(direction, Direction):
            direction = Direction.from_delta(*direction)
        if not direction.is_moving or self.state is not GameState.RUNNING:
            return False

        current = self._direction
        if direction is current.opposite():
            logger.debug("Ignored reversal %s while moving %s", direction.name, current.name)
            return False

        if direction is not self._pending_direction:
            self._pending_direction = direction
            self.events.publish(DirectionChanged(direction.dx, direction.dy))
        return True

    def add_points(self, points: int) -> None:
        """
        Add externally awarded points.

        Raises:
            PreconditionError: If points is not positive
        """
        if points <= 0:
            raise PreconditionError(f"Points to add must be positive, got {points}")
        self._add_score(points)
        self._update_level()

    def _add_score(self, points: int) -> None:
        self.score += points
        self.events.publish(ScoreChanged(self.score))

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def restore(self, snapshot: GameSnapshot) -> None:
        """
        Load an explicit board layout.

        The level is recomputed from the score; snapshot.level is ignored.
        Validation happens before anything is changed.

        Raises:
            PreconditionError: If the layout breaks a board invariant
        """
        if (snapshot.width, snapshot.height) != (self.width, self.height):
            raise PreconditionError(
                f"Snapshot is {snapshot.width}x{snapshot.height}, game is {self.width}x{self.height}"
            )
        body = SnakeBody.from_segments(snapshot.segments)
        cells = list(body.segments) + list(snapshot.obstacles) + [snapshot.food]
        for cell in cells:
            if is_out_of_bounds(cell, self.width, self.height):
                raise PreconditionError(f"{cell} is outside the board")
        if any(body.contains(cell) for cell in snapshot.obstacles):
            raise PreconditionError("Obstacles overlap the snake")
        if body.contains(snapshot.food) or snapshot.food in snapshot.obstacles:
            raise PreconditionError("Food overlaps the snake or an obstacle")
        if snapshot.score < 0:
            raise PreconditionError("Score cannot be negative")
        if not snapshot.direction.is_moving:
            raise PreconditionError("Direction must be a heading")

        self.snake = body
        self.obstacle_manager.clear()
        for cell in snapshot.obstacles:
            self.obstacle_manager.add(cell)
        self.food = snapshot.food
        self.score = snapshot.score
        self.level = self.progression.calculate_level(snapshot.score, self.points_per_level)
        self.tick_count = snapshot.tick
        self._direction = snapshot.direction
        self._pending_direction = snapshot.direction
        self.state = snapshot.state
        self._session_finalized = snapshot.state is GameState.GAME_OVER
        self._new_record = snapshot.new_record and self._session_finalized

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            width=self.width,
            height=self.height,
            segments=self.snake.segments,
            food=self.food,
            obstacles=self.obstacle_manager.obstacles,
            score=self.score,
            level=self.level,
            record=self._record,
            direction=self._pending_direction,
            state=self.state,
            tick=self.tick_count,
            points_to_next_level=self.get_points_to_next_level(),
            new_record=self._new_record,
        )

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering or logging.

        Returns:
            Dictionary containing full game state
        """
        return self.snapshot().to_dict()

    # Public getters
    def get_snake_segments(self) -> Tuple[Position, ...]:
        return self.snake.segments

    def get_food(self) -> Position:
        return self.food

    def get_obstacles(self) -> FrozenSet[Position]:
        return self.obstacle_manager.obstacles

    def get_score(self) -> int:
        return self.score

    def get_level(self) -> int:
        return self.level

    def get_direction(self) -> Direction:
        return self._pending_direction

    def get_record_score(self) -> int:
        return self._record

    def get_speed_multiplier(self) -> float:
        return self.progression.calculate_speed_multiplier(self.level)

    def get_points_to_next_level(self) -> int:
        return self.progression.calculate_points_to_next_level(self.score, self.points_per_level)

    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER
