import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from arcade_snake.clock import TickTimer
from arcade_snake.game import SnakeGame
from arcade_snake.storage import MemoryStore


class FakeTimer(TickTimer):
    """Records every schedule change instead of posting events."""

    def __init__(self):
        super().__init__()
        self.starts = []
        self.stops = 0

    def start(self, interval_ms):
        super().start(interval_ms)
        self.starts.append(interval_ms)

    def stop(self):
        super().stop()
        self.stops += 1


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, score, high_score):
        self.calls.append((score, high_score))


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_game(timer, store):
    def factory(grid_size=20, surface_size=400, seed=7, **kwargs):
        return SnakeGame(
            surface_size,
            grid_size,
            store=kwargs.pop("store", store),
            timer=kwargs.pop("timer", timer),
            rng=random.Random(seed),
        )

    return factory


@pytest.fixture
def game(make_game):
    return make_game()


@pytest.fixture
def score_events():
    return Recorder()


@pytest.fixture
def game_over_events():
    return Recorder()
