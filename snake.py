import logging
from collections import deque

from settings import CELL_SIZE, BOARD_WIDTH, BOARD_HEIGHT, get_interval

logger = logging.getLogger(__name__)

# (dx, dy) unit deltas, screen coordinates so up is -y
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
PRECEDENCE = (UP, DOWN, LEFT, RIGHT)
NAMES = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}


def opposite(direction):
    dx, dy = direction
    return (-dx, -dy)


def resolve_direction(current, pressed):
    """Pick this tick's direction from the pressed directional inputs.

    Inputs are checked in Up, Down, Left, Right order; the first one that is
    not the reverse of ``current`` wins. Nothing usable keeps ``current``.
    """
    for d in PRECEDENCE:
        if d in pressed and d != opposite(current):
            return d
    return current


def initial_body():
    return [
        (BOARD_WIDTH // 2 - CELL_SIZE, BOARD_HEIGHT // 2 - CELL_SIZE),
        (BOARD_WIDTH // 2, BOARD_HEIGHT // 2 - CELL_SIZE),
    ]


class Snake:
    def __init__(self, difficulty, body=None, direction=LEFT, start_time=0.0):
        body = initial_body() if body is None else list(body)
        if len(body) < 2:
            raise ValueError("snake needs at least two segments, got %d" % len(body))
        self.difficulty = difficulty
        self.interval = get_interval(difficulty)
        self.direction = direction
        self.add_segment = False
        self.last_move_time = start_time
        self._body = deque(body)

    @property
    def head(self):
        return self._body[0]

    @property
    def body(self):
        return tuple(self._body)

    def __len__(self):
        return len(self._body)

    def __iter__(self):
        return iter(self._body)

    def grow(self):
        self.add_segment = True

    def steer(self, pressed):
        new = resolve_direction(self.direction, pressed)
        if new != self.direction:
            logger.debug("Direction %s -> %s", NAMES[self.direction], NAMES[new])
            self.direction = new
        return self.direction

    def move(self):
        x, y = self._body[0]
        dx, dy = self.direction
        self._body.appendleft((x + dx * CELL_SIZE, y + dy * CELL_SIZE))
        # a pending segment is added by skipping this move's tail pop
        if self.add_segment:
            self.add_segment = False
        else:
            self._body.pop()

    def update(self, now, pressed=()):
        """Steer, then advance one cell if a full interval has elapsed.

        Returns True when the snake actually moved this tick.
        """
        self.steer(pressed)
        if now - self.last_move_time < self.interval:
            return False
        self.move()
        self.last_move_time = now
        logger.debug("Advanced to %s (len %d)", self.head, len(self))
        return True
