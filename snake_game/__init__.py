"""Single-player grid snake driven by a fixed-interval tick."""

from .food import FoodSpawner, GridFullError
from .game import GameLoop, GameState, Phase, speed_for_level
from .grid import DOWN, LEFT, NONE, RIGHT, UP, Grid
from .snake import Snake

__all__ = [
    "DOWN",
    "FoodSpawner",
    "GameLoop",
    "GameState",
    "Grid",
    "GridFullError",
    "LEFT",
    "NONE",
    "Phase",
    "RIGHT",
    "Snake",
    "UP",
    "speed_for_level",
]

__version__ = "1.0.0"
