"""pygame window, event loop and command line entry point."""

import argparse
import logging
import os
import random

import pygame

from .audio import SoundBoard
from .controls import Controls
from .food import FoodSpawner
from .game import GameLoop
from .grid import Grid
from .render import Renderer
from .settings import CELL_SIZE, FRAME_RATE, SAMPLE_RATE, SOUND_ENABLED, WINDOW_HEIGHT, WINDOW_WIDTH
from .timer import TICK_EVENT, PygameTickTimer

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake with a speed-up every five points.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Grid cell size in pixels")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument("--headless", action="store_true", help="Use dummy SDL video and audio drivers")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--no-cover", action="store_true", help="Skip the title screen")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)
    try:
        Grid.from_pixels(args.width, args.height, args.cell_size)
    except ValueError as exc:
        parser.error(f"canvas too small: {exc}")
    return args


def build_game(surface, grid, seed=None, sound_enabled=SOUND_ENABLED, show_cover=True):
    """Wire the game loop to its pygame collaborators."""
    renderer = Renderer(surface, grid)
    renderer.cover_visible = show_cover
    sounds = SoundBoard.create(enabled=sound_enabled)
    game = GameLoop(
        grid,
        PygameTickTimer(),
        spawner=FoodSpawner(grid, random.Random(seed)),
        renderer=renderer,
        sounds=sounds,
    )
    controls = Controls(game, renderer)
    # Initial draw before the first input.
    renderer.render(game.snake.cells, game.food, game.direction)
    return game, renderer, controls


def run(game, renderer, controls, max_frames=None):
    """Pump events until the window closes or Esc is pressed."""
    clock = pygame.time.Clock()
    frames = 0
    while max_frames is None or frames < max_frames:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return
            if event.type == TICK_EVENT:
                if game.timer.is_current(event):
                    game.tick()
            else:
                controls.handle_event(event)

        renderer.draw(game.state)
        pygame.display.flip()
        clock.tick(FRAME_RATE)
        frames += 1


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        os.environ["SDL_AUDIODRIVER"] = "dummy"

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Snake")
    grid = Grid.from_pixels(args.width, args.height, args.cell_size)
    screen = pygame.display.set_mode(grid.pixel_size)
    logger.info("Starting on %r", grid)

    game, renderer, controls = build_game(
        screen, grid, seed=args.seed, sound_enabled=not args.mute, show_cover=not args.no_cover
    )
    try:
        run(game, renderer, controls)
    finally:
        game.timer.cancel()
        pygame.quit()


if __name__ == "__main__":
    main()
