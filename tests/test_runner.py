"""
Tests for the fixed-interval game runner.

The runner is driven with a fake clock, a sleep that advances it and a
scripted input source, so no real time passes and no terminal is needed.
"""

import io

import pytest


class FakeClock:
    """Monotonic clock whose sleep just advances time."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        assert seconds >= 0
        self.now += seconds


class ScriptedInput:
    """Input source replaying one list of keys per poll, then Exit."""

    def __init__(self, script):
        self.script = list(script)

    def poll(self):
        from termsnake.visualization.keyboard import Key

        if self.script:
            return self.script.pop(0)
        return [Key.EXIT]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_runner(game, clock):
    """Build a runner around the `game` fixture."""
    from rich.console import Console
    from termsnake.visualization import GameRunner, TerminalRenderer

    def factory(script=(), **kwargs):
        kwargs.setdefault('show_start_screen', False)
        return GameRunner(
            game,
            TerminalRenderer(use_emoji=False),
            ScriptedInput(script),
            clock=clock,
            sleep=clock.sleep,
            console=Console(file=io.StringIO(), width=100, color_system=None),
            use_emoji=False,
            **kwargs
        )

    return factory


class TestKeyHandling:
    """Tests for per-state key bindings."""

    def test_arrows_steer(self, game, make_runner):
        """Test direction keys reach the game."""
        from termsnake.game import Direction
        from termsnake.visualization import Key

        runner = make_runner()
        runner.handle_key(Key.UP)

        assert game.get_direction() is Direction.UP

    def test_pause_toggles(self, game, make_runner):
        """Test P pauses and resumes."""
        from termsnake.game import GameState
        from termsnake.visualization import Key

        runner = make_runner()
        runner.handle_key(Key.PAUSE)
        assert game.state is GameState.PAUSED
        runner.handle_key(Key.UP)
        assert game.state is GameState.PAUSED
        runner.handle_key(Key.PAUSE)
        assert game.state is GameState.RUNNING

    @pytest.mark.parametrize("key", ["QUIT", "EXIT"])
    def test_quit_ends_session(self, game, make_runner, key):
        """Test Q and Esc end a running session without leaving."""
        from termsnake.visualization import Key

        runner = make_runner()
        runner.handle_key(Key[key])

        assert game.is_game_over()
        assert not runner._exit_requested

    def test_game_over_menu(self, game, make_runner):
        """Test R restarts and E exits after a game over."""
        from termsnake.game import GameState
        from termsnake.visualization import Key

        runner = make_runner()
        game.quit()

        runner.handle_key(Key.UP)
        assert game.is_game_over()

        runner.handle_key(Key.RESTART)
        assert game.state is GameState.RUNNING

        game.quit()
        runner.handle_key(Key.EXIT)
        assert runner._exit_requested


class TestTiming:
    """Tests for tick scheduling."""

    def test_tick_interval_follows_level(self, game, make_runner):
        """Test the base interval shrinks with the speed multiplier."""
        runner = make_runner()

        assert runner.tick_interval() == pytest.approx(0.150)
        game.add_points(4)
        assert runner.tick_interval() == pytest.approx(0.125)

    def test_difficulty_sets_base_interval(self, make_game, clock):
        """Test the difficulty picks the base interval."""
        from rich.console import Console
        from termsnake.visualization import GameRunner, TerminalRenderer

        game = make_game(difficulty="expert")
        runner = GameRunner(
            game,
            TerminalRenderer(),
            ScriptedInput([]),
            clock=clock,
            sleep=clock.sleep,
            console=Console(file=io.StringIO()),
        )

        assert runner.tick_interval() == pytest.approx(0.050)

    def test_ticks_only_when_due(self, game, make_runner, clock, place_food):
        """Test step ticks once per elapsed interval."""
        from termsnake.game import Position

        place_food(game, Position(0, 0))
        runner = make_runner(script=[[]] * 10)

        runner.step()
        assert game.tick_count == 1

        clock.now = 0.10
        runner.step()
        assert game.tick_count == 1

        clock.now = 0.15
        runner.step()
        assert game.tick_count == 2

    def test_no_ticks_while_paused(self, game, make_runner, clock):
        """Test a paused game is not ticked however much time passes."""
        from termsnake.visualization import Key

        runner = make_runner(script=[[Key.PAUSE], [], []])
        runner.step()
        clock.now = 10.0
        runner.step()

        assert game.tick_count == 0

    def test_board_full_ends_session(self, game, make_runner, monkeypatch):
        """Test a full board is treated as the end of the session."""
        from termsnake.game import BoardFullError

        def full_tick():
            raise BoardFullError(game.width, game.height)

        monkeypatch.setattr(game, "tick", full_tick)
        runner = make_runner(script=[[]])

        runner.step()

        assert game.is_game_over()


class TestRun:
    """Tests for the whole loop."""

    def test_play_restart_exit(self, game, make_runner):
        """Test a scripted session: start, quit, restart, exit."""
        from termsnake.visualization import Key

        script = [[Key.RIGHT], [], [], [Key.QUIT], [Key.RESTART], [], [Key.QUIT], [Key.EXIT]]
        runner = make_runner(script=script, show_start_screen=True)

        score = runner.run()

        assert runner.sessions_played == 2
        assert game.is_game_over()
        assert score == game.get_score()
        assert "GAME OVER" in runner.console.file.getvalue()

    def test_exit_from_start_screen(self, game, make_runner):
        """Test Esc on the title screen leaves before playing."""
        from termsnake.visualization import Key

        runner = make_runner(script=[[Key.EXIT]], show_start_screen=True)

        assert runner.run() == 0
        assert runner.sessions_played == 0
        assert game.tick_count == 0

    def test_view_per_state(self, game, make_runner):
        """Test paused and finished games add their menu to the board."""
        from rich.console import Group

        runner = make_runner()
        assert not isinstance(runner.view(), Group)

        game.pause()
        assert isinstance(runner.view(), Group)
        game.quit()
        assert isinstance(runner.view(), Group)
