"""
Tests for food.py - rejection-sampled food placement.
"""

import random

from settings import all_cells, in_bounds
from food import Food


class ScriptedRng:
    """Returns queued values from randint, in order."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


class TestFood:
    """Tests for the Food spawner."""

    def test_initial_position_off_snake(self):
        """Food never starts on a snake cell."""
        body = [(350, 350), (400, 350)]
        for seed in range(50):
            food = Food(body, rng=random.Random(seed))
            assert food.position not in body
            assert in_bounds(food.position)

    def test_rejects_occupied_cells(self):
        """A draw that lands on the body is discarded and redrawn."""
        body = [(350, 350), (400, 350)]
        # (6, 6) and (7, 6) are the body cells, (0, 0) is free
        food = Food(body, rng=ScriptedRng([6, 6, 7, 6, 0, 0]))
        assert food.position == (50, 50)

    def test_single_free_cell_is_found(self):
        """With one free cell left, that cell is the only possible result."""
        cells = all_cells()
        free = cells.pop(137)
        food = Food(cells, rng=random.Random(3))
        assert food.position == free
        assert food.respawn(cells) == free

    def test_respawn_avoids_body(self):
        """Respawning over a long body always lands on a free cell."""
        rng = random.Random(11)
        body = all_cells()[:200]
        food = Food(body, rng=rng)
        for _ in range(100):
            assert food.respawn(body) not in body

    def test_full_board_has_no_food(self):
        """When every cell is taken there is nowhere to spawn."""
        food = Food(all_cells(), rng=random.Random(0))
        assert food.position is None
        assert food.respawn(all_cells()) is None
