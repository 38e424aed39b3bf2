from settings import SCORE_MULTIPLIER


class ScoreBoard:
    def __init__(self, collision, length=2, multiplier=SCORE_MULTIPLIER):
        self.collision = collision
        self.multiplier = multiplier
        self.score = 0
        self.length = length

    def update(self):
        # consume the food-eaten signal so it counts exactly once
        if self.collision.food_eaten:
            self.score += self.multiplier
            self.length += 1
            self.collision.food_eaten = False
            return True
        return False
