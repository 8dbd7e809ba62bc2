"""Food placement on free grid cells."""

import logging
import random

logger = logging.getLogger(__name__)

# Past this occupancy ratio, sample from the explicit free list instead of retrying.
DENSE_RATIO = 0.5


class GridFullError(RuntimeError):
    """Raised when every cell is occupied and no food can be placed."""


class FoodSpawner:
    """Picks a uniformly random cell that the snake does not occupy."""

    def __init__(self, grid, rng=None):
        self.grid = grid
        self.rng = rng or random.Random()

    def spawn(self, occupied):
        """Return a random grid position that is not in ``occupied``."""
        occupied = set(occupied)
        if len(occupied) >= self.grid.capacity:
            raise GridFullError(f"no free cell left on {self.grid!r}")

        if len(occupied) <= self.grid.capacity * DENSE_RATIO:
            while True:
                pos = (
                    self.rng.randint(0, self.grid.width - 1),
                    self.rng.randint(0, self.grid.height - 1),
                )
                if pos not in occupied:
                    return pos

        free = [cell for cell in self.grid.cells() if cell not in occupied]
        if not free:
            # Occupied cells outside the grid inflated the count.
            raise GridFullError(f"no free cell left on {self.grid!r}")
        logger.debug("Dense board, choosing food among %d free cells", len(free))
        return self.rng.choice(free)
