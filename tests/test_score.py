"""
Tests for score.py - one-shot food-eaten scoring.
"""

from types import SimpleNamespace

from score import ScoreBoard


class TestScoreBoard:
    """Tests for ScoreBoard.update()."""

    def test_initial_counters(self):
        """Score starts at zero, length at the given body length."""
        board = ScoreBoard(SimpleNamespace(food_eaten=False))
        assert board.score == 0
        assert board.length == 2

    def test_food_eaten_counts_once(self):
        """One event adds 10 points and one length, then clears itself."""
        signal = SimpleNamespace(food_eaten=True)
        board = ScoreBoard(signal)
        assert board.update() is True
        assert (board.score, board.length) == (10, 3)
        assert signal.food_eaten is False
        assert board.update() is False
        assert (board.score, board.length) == (10, 3)

    def test_counters_never_decrease(self):
        """Repeated events only ever add."""
        signal = SimpleNamespace(food_eaten=False)
        board = ScoreBoard(signal, length=4)
        seen = []
        for eaten in (True, False, True, True, False):
            signal.food_eaten = eaten
            board.update()
            seen.append((board.score, board.length))
        assert seen == sorted(seen)
        assert (board.score, board.length) == (30, 7)
