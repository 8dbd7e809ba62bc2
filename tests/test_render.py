"""Tests for render.py - drawing onto an off-screen surface."""

import pygame
import pytest

from snake_game.game import GameState, Phase
from snake_game.grid import DOWN, LEFT, NONE, RIGHT, UP, Grid
from snake_game.render import Renderer, SwipeFeedback, direction_indicator, head_eyes
from snake_game.settings import BACKGROUND, FOOD_COLOR, SNAKE_COLOR


def make_state(phase=Phase.RUNNING, snake=((10, 10),), food=(3, 3), direction=RIGHT):
    return GameState(
        score=3,
        level=1,
        speed_ms=150,
        phase=phase,
        snake=snake,
        food=food,
        direction=direction,
    )


@pytest.fixture
def renderer(pygame_session):
    return Renderer(pygame.Surface((400, 400)), Grid(20, 20, 20))


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


class TestRenderer:
    """Tests for Renderer.draw."""

    def test_board_pixels(self, renderer):
        renderer.render([(10, 10), (9, 10)], (3, 3), RIGHT)
        renderer.draw(make_state())
        assert rgb(renderer.surface, (70, 70)) == FOOD_COLOR
        assert rgb(renderer.surface, (190, 210)) == SNAKE_COLOR
        assert rgb(renderer.surface, (390, 390)) == BACKGROUND

    def test_overlay_only_when_not_running(self, renderer):
        renderer.render([(0, 19)], (19, 19), NONE)
        renderer.draw(make_state(Phase.RUNNING))
        assert rgb(renderer.surface, (200, 200)) == BACKGROUND

        for phase in (Phase.NOT_STARTED, Phase.PAUSED, Phase.GAME_OVER):
            renderer.draw(make_state(phase))
            assert rgb(renderer.surface, (200, 200)) != BACKGROUND

    def test_debug_line(self, renderer):
        renderer.show_debug = True
        renderer.render([(10, 10)], (3, 3), UP)
        renderer.draw(make_state(Phase.GAME_OVER))
        assert rgb(renderer.surface, (10, 390)) != BACKGROUND

    def test_swipe_feedback_fades_out(self, renderer):
        renderer.show_swipe_feedback(300, 300)
        renderer.draw(make_state())
        assert renderer.swipe.radius == 12
        for _ in range(30):
            renderer.draw(make_state())
        assert renderer.swipe is None


class TestShapes:
    """Tests for the head geometry helpers."""

    def test_swipe_feedback_step(self):
        swipe = SwipeFeedback(5, 5)
        assert swipe.step()
        assert swipe.radius == 12
        assert swipe.alpha == pytest.approx(0.96)

    def test_eyes_face_direction(self):
        rect = pygame.Rect(0, 0, 20, 20)
        assert head_eyes(rect, RIGHT) == [(15, 5), (15, 15)]
        assert head_eyes(rect, LEFT) == [(5, 5), (5, 15)]
        assert head_eyes(rect, DOWN) == [(5, 15), (15, 15)]
        assert head_eyes(rect, UP) == head_eyes(rect, NONE) == [(5, 5), (15, 5)]

    def test_no_indicator_while_stationary(self):
        assert direction_indicator((10, 10), 10, NONE) is None

    def test_indicator_tip_points_forward(self):
        assert direction_indicator((10, 10), 10, RIGHT)[1] == (20, 10)
        assert direction_indicator((10, 10), 10, UP)[1] == (10, 0)


class TestTitleScreen:
    """Tests for the title screen."""

    def test_cover_hides_board(self, renderer):
        renderer.render([(3, 3)], (10, 10), NONE)
        renderer.cover_visible = True
        renderer.draw(make_state(Phase.NOT_STARTED, snake=((3, 3),), food=(10, 10)))
        assert rgb(renderer.surface, (70, 70)) != SNAKE_COLOR
        assert rgb(renderer.surface, (390, 390)) != BACKGROUND

    def test_board_after_dismissal(self, renderer):
        renderer.render([(10, 10)], (3, 3), RIGHT)
        renderer.cover_visible = True
        renderer.dismiss_cover()
        renderer.draw(make_state())
        assert rgb(renderer.surface, (70, 70)) == FOOD_COLOR
