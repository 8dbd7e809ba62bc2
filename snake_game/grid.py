"""Grid geometry: cell coordinates, pixel bounds and direction vectors."""

import pygame

from .settings import CELL_SIZE

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
NONE = (0, 0)

MOVES = (UP, DOWN, LEFT, RIGHT)


def is_move(direction):
    """Return True for the four unit directions, False for anything else."""
    return direction in MOVES


def opposite(direction):
    """Return the reverse of a direction vector."""
    return (-direction[0], -direction[1])


def direction_to_text(direction):
    """Convert a direction vector into a compact label for debug UI."""
    mapping = {
        None: "none",
        NONE: "none",
        UP: "up",
        DOWN: "down",
        LEFT: "left",
        RIGHT: "right",
    }
    return mapping.get(direction, "unknown")


class Grid:
    """A rectangular board of square cells."""

    def __init__(self, width, height, cell_size=CELL_SIZE):
        if width < 1 or height < 1 or cell_size < 1:
            raise ValueError("Grid dimensions and cell size must be positive.")
        if width * height < 2:
            raise ValueError("Grid needs room for the snake and one food cell.")
        self.width = width
        self.height = height
        self.cell_size = cell_size

    @classmethod
    def from_pixels(cls, pixel_width, pixel_height, cell_size=CELL_SIZE):
        """Derive the grid that fits a drawing surface of the given size."""
        return cls(pixel_width // cell_size, pixel_height // cell_size, cell_size)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, cell_size={self.cell_size})"

    @property
    def capacity(self):
        return self.width * self.height

    @property
    def center(self):
        return (self.width // 2, self.height // 2)

    @property
    def pixel_size(self):
        return (self.width * self.cell_size, self.height * self.cell_size)

    def contains(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self):
        """Yield every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def cell_to_pixel_bounds(self, cell):
        """Return (center_x, center_y, size) of a cell in pixels."""
        x, y = cell
        half = self.cell_size / 2
        return (x * self.cell_size + half, y * self.cell_size + half, self.cell_size)

    def cell_rect(self, cell, padding=0):
        """Return a pixel rectangle for a grid position."""
        x, y = cell
        return pygame.Rect(
            x * self.cell_size + padding,
            y * self.cell_size + padding,
            self.cell_size - padding * 2,
            self.cell_size - padding * 2,
        )
