import logging
import random

from settings import COLS, ROWS, BOARD_CELLS, cell_to_world

logger = logging.getLogger(__name__)


class Food:
    """Single food cell that never spawns on the snake."""

    def __init__(self, snake_body, rng=None):
        self.rng = rng or random
        self.position = None
        self.respawn(snake_body)

    def generate_random_pos(self, snake_body):
        occupied = set(snake_body)
        while True:
            pos = cell_to_world(self.rng.randint(0, COLS - 1), self.rng.randint(0, ROWS - 1))
            if pos not in occupied:
                return pos

    def respawn(self, snake_body):
        """Move the food to a free cell; None when the board is full."""
        if len(set(snake_body)) >= BOARD_CELLS:
            logger.info("No free cell left for food")
            self.position = None
        else:
            self.position = self.generate_random_pos(snake_body)
            logger.debug("Food spawned at %s", self.position)
        return self.position
