"""Translate raw pygame input into game intents."""

import logging

import pygame

from .game import Phase
from .grid import DOWN, LEFT, RIGHT, UP, direction_to_text
from .settings import SWIPE_THRESHOLD_PX

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}
PAUSE_KEYS = (pygame.K_SPACE, pygame.K_p)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def swipe_direction(dx, dy, threshold=SWIPE_THRESHOLD_PX):
    """Direction of a drag by its dominant axis, or None for a short drag."""
    if abs(dx) <= threshold and abs(dy) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class Controls:
    """Input adapter between pygame events and a GameLoop."""

    def __init__(self, game, renderer=None):
        self.game = game
        self.renderer = renderer
        self.drag_start = None

    def request_direction(self, direction):
        """Forward a turn, only along the axis the snake is not already moving on."""
        if self.game.phase is Phase.PAUSED:
            return False
        dx, dy = self.game.direction
        if direction[0] != 0 and dx != 0:
            return False
        if direction[1] != 0 and dy != 0:
            return False
        return self.game.change_direction(direction)

    def request_pause_toggle(self):
        if self.game.can_pause:
            self.game.toggle_pause()

    def request_start(self):
        if self.game.phase is Phase.RUNNING:
            logger.debug("Start ignored while running")
            return
        self.game.start()

    def request_restart(self):
        if self.game.can_restart:
            self.game.restart()

    def toggle_debug(self):
        if self.renderer is not None:
            self.renderer.show_debug = not self.renderer.show_debug

    def handle_event(self, event):
        """Dispatch one pygame event. Quit handling belongs to the app loop."""
        if self.renderer is not None and self.renderer.cover_visible:
            self.handle_cover_event(event)
        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False):
            self.drag_start = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and not getattr(event, "touch", False):
            self.end_drag(event.pos)
        elif event.type == pygame.FINGERDOWN:
            self.drag_start = self.finger_position(event)
        elif event.type == pygame.FINGERUP:
            self.end_drag(self.finger_position(event))

    def handle_cover_event(self, event):
        """Only a click, a touch or Enter gets past the title screen."""
        clicked = event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)
        entered = event.type == pygame.KEYDOWN and event.key in START_KEYS
        if clicked or entered:
            self.renderer.dismiss_cover()
            logger.debug("Title screen dismissed")

    def handle_key(self, key):
        if key in PAUSE_KEYS:
            self.request_pause_toggle()
        elif key in START_KEYS:
            self.request_start()
        elif key == pygame.K_r:
            self.request_restart()
        elif key == pygame.K_h:
            self.toggle_debug()
        elif key in KEY_TO_DIRECTION:
            self.request_direction(KEY_TO_DIRECTION[key])

    def finger_position(self, event):
        """Scale normalized touch coordinates to surface pixels."""
        if self.renderer is not None:
            width, height = self.renderer.surface.get_size()
        else:
            width, height = self.game.grid.pixel_size
        return (event.x * width, event.y * height)

    def end_drag(self, pos):
        start, self.drag_start = self.drag_start, None
        if start is None or self.game.phase is Phase.PAUSED:
            return
        direction = swipe_direction(pos[0] - start[0], pos[1] - start[1])
        if direction is None:
            return
        if self.renderer is not None:
            self.renderer.show_swipe_feedback(*pos)
        logger.debug("Swipe %s", direction_to_text(direction))
        self.request_direction(direction)
