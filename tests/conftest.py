"""Shared fixtures: headless pygame and in-memory game collaborators."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from snake_game.food import FoodSpawner
from snake_game.game import GameLoop
from snake_game.grid import Grid
from snake_game.timer import TickTimer


class FakeTimer(TickTimer):
    """Records schedule calls instead of posting pygame events."""

    def __init__(self):
        super().__init__()
        self.starts = []
        self.cancels = 0

    def _schedule(self, interval_ms):
        self.starts.append(interval_ms)

    def _unschedule(self):
        self.cancels += 1


class StubSpawner(FoodSpawner):
    """Hands out queued food cells, then falls back to the first free cell."""

    def __init__(self, grid, cells=()):
        super().__init__(grid)
        self.queue = list(cells)
        self.calls = []

    def spawn(self, occupied):
        occupied = set(occupied)
        self.calls.append(occupied)
        if self.queue:
            return self.queue.pop(0)
        return super().spawn(occupied)


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def render(self, snake_cells, food_cell, head_direction):
        self.frames.append((tuple(snake_cells), food_cell, head_direction))


class RecordingSounds:
    def __init__(self):
        self.played = []

    def on_eat(self):
        self.played.append("eat")

    def on_game_over(self):
        self.played.append("game_over")

    def on_pause(self):
        self.played.append("pause")

    def on_resume(self):
        self.played.append("resume")


@pytest.fixture
def grid():
    return Grid(20, 20, 20)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def make_game(grid, timer, renderer, sounds):
    """Build a GameLoop whose food appears at the given cells, in order."""

    def factory(food_cells=(), statuses=None):
        return GameLoop(
            grid,
            timer,
            spawner=StubSpawner(grid, food_cells),
            renderer=renderer,
            sounds=sounds,
            on_status=statuses.append if statuses is not None else None,
        )

    return factory


@pytest.fixture(scope="session")
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
