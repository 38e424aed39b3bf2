import logging
from enum import Enum

logger = logging.getLogger(__name__)

# --- Config ---
CELL_SIZE = 50
OFFSET = 50
BOARD_WIDTH, BOARD_HEIGHT = 800, 800
COLS, ROWS = BOARD_WIDTH // CELL_SIZE, BOARD_HEIGHT // CELL_SIZE
BOARD_CELLS = COLS * ROWS

WINDOW_WIDTH, WINDOW_HEIGHT = 900, 950
FPS = 60

SCORE_MULTIPLIER = 10
FALLBACK_INTERVAL = 0.6


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


INTERVALS = {
    Difficulty.EASY: 0.5,
    Difficulty.MEDIUM: 0.3,
    Difficulty.HARD: 0.1,
}


def parse_difficulty(value):
    """Map a difficulty name (or member) to a Difficulty, Easy when unknown."""
    if isinstance(value, Difficulty):
        return value
    for d in Difficulty:
        if value == d.value:
            return d
    logger.warning("Unknown difficulty %r, using %s", value, Difficulty.EASY.value)
    return Difficulty.EASY


def get_interval(difficulty):
    # anything that slipped past parse_difficulty gets the slow fallback
    return INTERVALS.get(difficulty, FALLBACK_INTERVAL)


# --- Grid geometry ---
def cell_to_world(col, row):
    return (OFFSET + col * CELL_SIZE, OFFSET + row * CELL_SIZE)


def world_to_cell(x, y):
    return ((x - OFFSET) // CELL_SIZE, (y - OFFSET) // CELL_SIZE)


def in_bounds(pos):
    x, y = pos
    return (OFFSET <= x < OFFSET + BOARD_WIDTH and
            OFFSET <= y < OFFSET + BOARD_HEIGHT)


def all_cells():
    return [cell_to_world(c, r) for r in range(ROWS) for c in range(COLS)]
