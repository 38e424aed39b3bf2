import logging

from settings import in_bounds

logger = logging.getLogger(__name__)

WALL, SELF, BOARD_FULL = "wall", "self", "board_full"


class CollisionHandler:
    """Checks the snake head against food, the board border and the body.

    Holds only the snake and food objects; everything goes through their
    public ``head``/``body``/``grow`` and ``position``/``respawn`` members.
    """

    def __init__(self, snake, food):
        self.snake = snake
        self.food = food
        self.food_eaten = False
        self.game_over = False
        self.reason = None

    def _latch(self, reason):
        if not self.game_over:
            self.game_over = True
            self.reason = reason
            logger.info("Game over: %s at %s", reason, self.snake.head)

    def food_collision(self, head):
        if head == self.food.position:
            self.food.respawn(self.snake.body)
            self.snake.grow()
            self.food_eaten = True
            logger.info("Food eaten at %s", head)
        if self.food.position is None:
            self._latch(BOARD_FULL)

    def border_collision(self, head):
        if not in_bounds(head):
            self._latch(WALL)

    def self_collision(self, head):
        body = self.snake.body
        for segment in body[1:]:
            if segment == head:
                self._latch(SELF)
                break

    def handle(self):
        head = self.snake.head
        self.food_collision(head)
        self.border_collision(head)
        self.self_collision(head)
        return self.game_over
