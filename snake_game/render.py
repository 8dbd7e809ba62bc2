"""pygame drawing for the board, HUD and overlays."""

from dataclasses import dataclass

import pygame

from .game import OVERLAY_TITLES, Phase
from .grid import DOWN, LEFT, NONE, RIGHT, UP, direction_to_text
from .settings import (
    BACKGROUND,
    EYE_COLOR,
    FOOD_COLOR,
    FOOD_OUTLINE,
    HUD_BASE_SIZE,
    HUD_SMALL_SIZE,
    INDICATOR_COLOR,
    SNAKE_COLOR,
    SWIPE_ALPHA_STEP,
    SWIPE_COLOR,
    SWIPE_RADIUS_STEP,
    SWIPE_START_RADIUS,
    WHITE,
)

COVER_HINT = "Click or press Enter to play"

OVERLAY_HINTS = {
    Phase.NOT_STARTED: "Arrows / WASD or swipe to start",
    Phase.PAUSED: "Space or P to resume",
    Phase.GAME_OVER: "Enter to play again",
}


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "DejaVu Sans", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


@dataclass
class SwipeFeedback:
    """Expanding ring shown where a swipe ended."""

    x: float
    y: float
    radius: float = SWIPE_START_RADIUS
    alpha: float = 1.0

    def step(self):
        """Advance one frame. Returns False once the ring has faded out."""
        self.radius += SWIPE_RADIUS_STEP
        self.alpha -= SWIPE_ALPHA_STEP
        return self.alpha > 0


def head_eyes(rect, direction):
    """Eye centers on the head cell, placed toward the direction of travel."""
    near = rect.width // 4
    far = rect.width - rect.width // 4
    left, top = rect.topleft
    if direction == RIGHT:
        return [(left + far, top + near), (left + far, top + far)]
    if direction == LEFT:
        return [(left + near, top + near), (left + near, top + far)]
    if direction == DOWN:
        return [(left + near, top + far), (left + far, top + far)]
    # Up or stationary
    return [(left + near, top + near), (left + far, top + near)]


def direction_indicator(center, radius, direction):
    """Triangle pointing from the head center toward the direction of travel."""
    if direction == NONE:
        return None
    cx, cy = center
    size = radius * 0.7
    if direction == RIGHT:
        return [(cx, cy - size), (cx + radius, cy), (cx, cy + size)]
    if direction == LEFT:
        return [(cx, cy - size), (cx - radius, cy), (cx, cy + size)]
    if direction == DOWN:
        return [(cx - size, cy), (cx, cy + radius), (cx + size, cy)]
    if direction == UP:
        return [(cx - size, cy), (cx, cy - radius), (cx + size, cy)]
    return None


class Renderer:
    """Draws game snapshots onto a pygame surface."""

    def __init__(self, surface, grid):
        self.surface = surface
        self.grid = grid
        self.snake = ()
        self.food = None
        self.direction = NONE
        self.swipe = None
        self.show_debug = False
        self.cover_visible = False
        self.small_font = get_ui_font(HUD_SMALL_SIZE)
        self.title_font = get_ui_font(HUD_BASE_SIZE + 10)

    # Render trigger from the game loop.
    def render(self, snake_cells, food_cell, head_direction):
        self.snake = tuple(snake_cells)
        self.food = food_cell
        self.direction = head_direction

    def show_swipe_feedback(self, x, y):
        self.swipe = SwipeFeedback(x, y)

    def dismiss_cover(self):
        self.cover_visible = False

    def draw(self, state):
        """Paint a full frame for ``state`` (a GameState snapshot)."""
        self.surface.fill(BACKGROUND)
        if self.cover_visible:
            self.draw_cover()
            return
        if self.food is not None:
            self.draw_food(self.food)
        if self.snake:
            self.draw_snake(self.snake, self.direction)
        self.draw_swipe_feedback()
        self.draw_hud(state)
        if self.show_debug:
            self.draw_debug_status(state)
        if state.phase is not Phase.RUNNING:
            self.draw_overlay(state)

    def draw_cover(self):
        """Title screen shown until the first click or Enter."""
        width, height = self.surface.get_size()
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 140))
        self.surface.blit(panel, (0, 0))
        title = self.title_font.render("Snake", True, WHITE)
        hint = self.small_font.render(COVER_HINT, True, WHITE)
        self.surface.blit(title, title.get_rect(center=(width // 2, height // 2 - 20)))
        self.surface.blit(hint, hint.get_rect(center=(width // 2, height // 2 + 20)))

    def draw_food(self, cell):
        """Draw the food as an outlined disc."""
        cx, cy, size = self.grid.cell_to_pixel_bounds(cell)
        radius = max(1, int(size / 2) - 2)
        center = (int(cx), int(cy))
        pygame.draw.circle(self.surface, FOOD_COLOR, center, radius)
        pygame.draw.circle(self.surface, FOOD_OUTLINE, center, radius, 2)

    def draw_snake(self, cells, direction):
        """Draw round body segments and a head with eyes facing the direction."""
        for cell in reversed(cells[1:]):
            cx, cy, size = self.grid.cell_to_pixel_bounds(cell)
            pygame.draw.circle(self.surface, SNAKE_COLOR, (int(cx), int(cy)), int(size / 2))
        self.draw_head(cells[0], direction)

    def draw_head(self, cell, direction):
        cx, cy, size = self.grid.cell_to_pixel_bounds(cell)
        radius = size / 2
        center = (int(cx), int(cy))
        pygame.draw.circle(self.surface, SNAKE_COLOR, center, int(radius))

        eye_radius = max(1, size // 10)
        for eye in head_eyes(self.grid.cell_rect(cell), direction):
            pygame.draw.circle(self.surface, EYE_COLOR, eye, eye_radius)

        triangle = direction_indicator(center, radius, direction)
        if triangle:
            pygame.draw.polygon(self.surface, INDICATOR_COLOR, triangle)

    def draw_swipe_feedback(self):
        """Draw the swipe ring and advance its animation by one frame."""
        if self.swipe is None:
            return
        swipe = self.swipe
        radius = int(swipe.radius)
        ring = pygame.Surface((radius * 2 + 6, radius * 2 + 6), pygame.SRCALPHA)
        alpha = max(0, min(255, int(255 * 0.8 * swipe.alpha)))
        pygame.draw.circle(ring, (*SWIPE_COLOR, alpha), (radius + 3, radius + 3), radius, 3)
        self.surface.blit(ring, (int(swipe.x) - radius - 3, int(swipe.y) - radius - 3))
        if not swipe.step():
            self.swipe = None

    def draw_hud(self, state):
        """Draw score, level and best score along the top edge."""
        label = f"Score: {state.score}   Level: {state.level}   Best: {state.best_score}"
        text = self.small_font.render(label, True, WHITE)
        width, _ = self.surface.get_size()
        bar = pygame.Rect(8, 8, width - 16, text.get_height() + 8)
        panel = pygame.Surface(bar.size, pygame.SRCALPHA)
        panel.fill((0, 0, 0, 120))
        self.surface.blit(panel, bar.topleft)
        self.surface.blit(text, text.get_rect(center=bar.center))

    def draw_debug_status(self, state):
        """Draw debug line when debug mode is enabled."""
        debug = (
            f"paused={str(state.phase is Phase.PAUSED).lower()}  "
            f"direction={direction_to_text(state.direction)}  "
            f"game_over_reason={state.game_over_reason or 'none'}"
        )
        text = self.small_font.render(debug, True, WHITE)
        width, height = self.surface.get_size()
        panel_h = text.get_height() + 8
        panel_rect = pygame.Rect(8, height - panel_h - 8, width - 16, panel_h)
        panel = pygame.Surface(panel_rect.size, pygame.SRCALPHA)
        panel.fill((0, 0, 0, 120))
        self.surface.blit(panel, panel_rect.topleft)
        self.surface.blit(text, (panel_rect.left + 6, panel_rect.top + 4))

    def draw_overlay(self, state):
        """Draw the ready / paused / game-over panel."""
        width, height = self.surface.get_size()
        title = self.title_font.render(OVERLAY_TITLES[state.phase], True, WHITE)
        hint = self.small_font.render(OVERLAY_HINTS[state.phase], True, WHITE)

        box = pygame.Rect(0, 0, max(title.get_width(), hint.get_width()) + 32,
                          title.get_height() + hint.get_height() + 28)
        box.center = (width // 2, height // 2)
        panel = pygame.Surface(box.size, pygame.SRCALPHA)
        panel.fill((0, 0, 0, 160))
        self.surface.blit(panel, box.topleft)
        self.surface.blit(title, title.get_rect(centerx=box.centerx, top=box.top + 10))
        self.surface.blit(hint, hint.get_rect(centerx=box.centerx, bottom=box.bottom - 10))
