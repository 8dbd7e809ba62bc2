"""Tests for app.py - wiring and the event loop."""

import pygame
import pytest

from snake_game.app import build_game, parse_args, run
from snake_game.game import Phase
from snake_game.grid import Grid
from snake_game.timer import TICK_EVENT


@pytest.fixture
def wired(pygame_session):
    grid = Grid(20, 20, 20)
    screen = pygame.display.set_mode(grid.pixel_size)
    game, renderer, controls = build_game(screen, grid, seed=1, sound_enabled=False, show_cover=False)
    pygame.event.clear()
    yield game, renderer, controls
    game.timer.cancel()
    pygame.event.clear()


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        args = parse_args([])
        assert (args.width, args.height, args.cell_size) == (400, 400, 20)
        assert not args.mute
        assert args.seed is None

    def test_canvas_too_small_for_a_game(self):
        with pytest.raises(SystemExit):
            parse_args(["--width", "20", "--height", "20"])

    def test_overrides(self):
        args = parse_args(["--width", "600", "--cell-size", "30", "--mute", "--seed", "4"])
        assert args.width == 600
        assert args.cell_size == 30
        assert args.mute
        assert args.seed == 4


class TestRun:
    """Tests for the pygame event loop."""

    def test_key_then_tick(self, wired):
        game, renderer, controls = wired
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        run(game, renderer, controls, max_frames=1)
        pygame.event.post(pygame.event.Event(TICK_EVENT, generation=game.timer.generation))
        run(game, renderer, controls, max_frames=1)
        assert game.phase is Phase.RUNNING
        assert game.snake.head == (11, 10)
        assert renderer.snake[0] == (11, 10)

    def test_quit_event_stops_loop(self, wired):
        game, renderer, controls = wired
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        run(game, renderer, controls, max_frames=1000)
        assert game.phase is Phase.NOT_STARTED

    def test_initial_render(self, wired):
        game, renderer, _ = wired
        assert renderer.snake == ((10, 10),)
        assert renderer.food == game.food

    def test_stale_tick_is_dropped(self, wired):
        """A tick from an interval that has since been replaced does not move the snake."""
        game, renderer, controls = wired
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        run(game, renderer, controls, max_frames=1)
        stale = game.timer.generation

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        pygame.event.post(pygame.event.Event(TICK_EVENT, generation=stale))
        run(game, renderer, controls, max_frames=1)
        assert game.phase is Phase.RUNNING
        assert game.snake.head == (10, 10)

    def test_title_screen_swallows_first_keys(self, pygame_session):
        grid = Grid(20, 20, 20)
        screen = pygame.display.set_mode(grid.pixel_size)
        game, renderer, controls = build_game(screen, grid, seed=1, sound_enabled=False)
        pygame.event.clear()
        assert renderer.cover_visible
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
        run(game, renderer, controls, max_frames=1)
        assert game.phase is Phase.NOT_STARTED
        assert not renderer.cover_visible
        pygame.event.clear()
