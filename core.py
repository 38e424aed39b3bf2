import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from settings import COLS, ROWS, in_bounds, parse_difficulty, world_to_cell
from snake import Snake
from food import Food
from collision import CollisionHandler, BOARD_FULL
from score import ScoreBoard

logger = logging.getLogger(__name__)

EMPTY, BODY, FOOD, HEAD = 0, 1, 2, 3


@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Tuple[int, int], ...]
    food: Optional[Tuple[int, int]]
    score: int
    length: int
    game_over: bool
    game_over_elapsed: float
    reason: Optional[str]


class GameCore:
    """One snake session: Running until a fatal collision, then frozen.

    There is no restart; build a new GameCore for a new session.
    """

    def __init__(self, difficulty="Easy", start_time=0.0, rng=None, snake=None):
        self.difficulty = parse_difficulty(difficulty)
        if snake is None:
            snake = Snake(self.difficulty, start_time=start_time)
        self.snake = snake
        self.food = Food(self.snake.body, rng=rng)
        self.collision = CollisionHandler(self.snake, self.food)
        self.score_board = ScoreBoard(self.collision, length=len(self.snake))
        self.game_over = False
        self.game_over_time = None
        logger.debug("New session, difficulty=%s interval=%.2fs",
                     self.difficulty.value, self.snake.interval)

    @property
    def running(self):
        return not self.game_over

    @property
    def won(self):
        return self.game_over and self.collision.reason == BOARD_FULL

    @property
    def score(self):
        return self.score_board.score

    @property
    def length(self):
        return self.score_board.length

    def tick(self, now, pressed=()):
        """Run one frame of simulation; returns the game-over flag."""
        if self.game_over:
            return True
        self.snake.update(now, pressed)
        over = self.collision.handle()
        self.score_board.update()
        if over:
            self.game_over = True
            self.game_over_time = now
            logger.info("Final score %d, length %d", self.score, self.length)
        return self.game_over

    def game_over_elapsed(self, now):
        if self.game_over_time is None:
            return 0.0
        return now - self.game_over_time

    def snapshot(self, now):
        return Snapshot(
            body=self.snake.body,
            food=self.food.position,
            score=self.score,
            length=self.length,
            game_over=self.game_over,
            game_over_elapsed=self.game_over_elapsed(now),
            reason=self.collision.reason,
        )

    def grid(self):
        state = np.zeros((ROWS, COLS), dtype=int)
        for i, pos in enumerate(self.snake):
            if in_bounds(pos):
                x, y = world_to_cell(*pos)
                state[y, x] = HEAD if i == 0 else BODY
        if self.food.position is not None:
            fx, fy = world_to_cell(*self.food.position)
            state[fy, fx] = FOOD
        return state
