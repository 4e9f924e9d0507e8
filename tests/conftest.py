"""
Pytest configuration and fixtures for termsnake tests.

Provides a seeded game factory, an event recorder and a temporary record
file so game tests are deterministic and never touch the real record.
"""

import random
import sys
from pathlib import Path

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


class EventRecorder:
    """Collects every event published on a bus."""

    def __init__(self, bus):
        self.events = []
        bus.subscribe_all(self.events.append)

    def of_type(self, event_type):
        return [e for e in self.events if isinstance(e, event_type)]

    def clear(self):
        self.events.clear()


@pytest.fixture
def make_game():
    """
    Factory for games on the 20x10 example board.

    Keyword arguments are passed to SnakeConfig; record_store and
    event_bus go to SnakeGame.
    """
    from termsnake.game import EventBus, SnakeConfig, SnakeGame

    def factory(record_store=None, event_bus=None, seed=1234, **config_kwargs):
        config_kwargs.setdefault('width', 20)
        config_kwargs.setdefault('height', 10)
        config = SnakeConfig(**config_kwargs)
        return SnakeGame(
            config,
            record_store=record_store,
            event_bus=event_bus or EventBus(),
            rng=random.Random(seed),
        )

    return factory


@pytest.fixture
def game(make_game):
    """A fresh 20x10 game with head at (10, 5) heading right."""
    return make_game()


@pytest.fixture
def recorder(game):
    """Records events published by the `game` fixture after creation."""
    return EventRecorder(game.events)


@pytest.fixture
def place_food():
    """Move the food of a running game to an explicit cell."""
    from dataclasses import replace

    def _place(game, position):
        game.restore(replace(game.snapshot(), food=position))

    return _place


@pytest.fixture
def record_file(tmp_path):
    """Path for a record file that does not exist yet."""
    return tmp_path / "records" / "record.json"
