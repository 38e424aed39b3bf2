import argparse, logging, math, random, time
import pygame

from settings import (CELL_SIZE, OFFSET, COLS, ROWS, BOARD_WIDTH, BOARD_HEIGHT,
                      WINDOW_WIDTH, WINDOW_HEIGHT, FPS)
from snake import UP, DOWN, LEFT, RIGHT
from core import GameCore

logger = logging.getLogger(__name__)

# Colors
BACKGROUND, GRID = (73, 98, 58), (110, 135, 95)
PURPLE, FOOD_RED, ORANGE, BLACK = (200, 122, 255), (255, 50, 50), (255, 161, 0), (0, 0, 0)
BORDER = 8

KEYMAP = {
    UP: (pygame.K_w, pygame.K_UP),
    DOWN: (pygame.K_s, pygame.K_DOWN),
    LEFT: (pygame.K_a, pygame.K_LEFT),
    RIGHT: (pygame.K_d, pygame.K_RIGHT),
}


def pressed_directions(keys):
    """Turn a pygame key-state sequence into the set of held directions."""
    return {d for d, codes in KEYMAP.items() if any(keys[c] for c in codes)}


def game_over_alpha(elapsed):
    # pulses 0..255, about two flashes a second
    return int((math.sin(elapsed * 3) + 1) * 0.5 * 255)


class SnakeGame:
    def __init__(self, difficulty="Medium", seed=None, fps=FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake")
        self.font = pygame.font.SysFont("arial", 50, bold=True)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.start = time.monotonic()
        self.core = GameCore(difficulty, start_time=0.0, rng=random.Random(seed))

    def now(self):
        return time.monotonic() - self.start

    def render(self, snap):
        self.screen.fill(BACKGROUND)
        pygame.draw.rect(self.screen, BLACK,
                         (OFFSET - BORDER, OFFSET - BORDER, BOARD_WIDTH + 2*BORDER, BOARD_HEIGHT + 2*BORDER), BORDER)
        for i in range(ROWS + 1):
            y = OFFSET + i*CELL_SIZE
            pygame.draw.line(self.screen, GRID, (OFFSET, y), (OFFSET + COLS*CELL_SIZE, y))
        for j in range(COLS + 1):
            x = OFFSET + j*CELL_SIZE
            pygame.draw.line(self.screen, GRID, (x, OFFSET), (x, OFFSET + ROWS*CELL_SIZE))

        # Food
        if snap.food is not None:
            fx, fy = snap.food
            pygame.draw.circle(self.screen, FOOD_RED, (fx + CELL_SIZE//2, fy + CELL_SIZE//2), CELL_SIZE//2)

        # Snake
        for x, y in snap.body:
            pygame.draw.rect(self.screen, PURPLE, (x, y, CELL_SIZE, CELL_SIZE), border_radius=CELL_SIZE//4)

        # HUD
        hud_y = BOARD_HEIGHT + int(1.5*OFFSET)
        self.screen.blit(self.font.render(f"Score : {snap.score}", True, ORANGE), (OFFSET, hud_y))
        self.screen.blit(self.font.render(f"Length : {snap.length}", True, ORANGE), (BOARD_WIDTH - 4*OFFSET, hud_y))

        if snap.game_over:
            text = "YOU WIN!" if self.core.won else "GAME OVER!"
            label = self.font.render(text, True, (255, 0, 0))
            label.set_alpha(game_over_alpha(snap.game_over_elapsed))
            self.screen.blit(label, (BOARD_WIDTH//2 - 4*CELL_SIZE, BOARD_HEIGHT//2))

        pygame.display.flip()

    def run(self):
        try:
            while True:
                for e in pygame.event.get():
                    if e.type == pygame.QUIT:
                        return self.core.score
                now = self.now()
                self.core.tick(now, pressed_directions(pygame.key.get_pressed()))
                self.render(self.core.snapshot(now))
                self.clock.tick(self.fps)
        finally:
            pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--difficulty", type=str, default="Medium",
                        help="Easy, Medium or Hard (anything else plays as Easy)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--fps", type=int, default=FPS, help="Target frame rate")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    game = SnakeGame(args.difficulty, seed=args.seed, fps=args.fps)
    score = game.run()
    logger.info("Session closed, score %d", score)


if __name__ == "__main__":
    main()
