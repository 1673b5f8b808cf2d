"""Scoring of a ten-pin bowling game."""

from __future__ import annotations

_FRAMES = 10
_MAX_ROLLS = 21


class Game:
    """Records rolls and computes the score of a bowling game."""

    def __init__(self) -> None:
        self._rolls = [0] * _MAX_ROLLS
        self._count = 0

    def record_roll(self, pins: int) -> None:
        """Record the number of pins knocked down by one roll."""
        self._rolls[self._count] = pins
        self._count += 1

    def calculate_score(self) -> int:
        """Return the score of the ten frames rolled so far."""
        rolls = self._rolls
        score = 0
        roll = 0
        for _ in range(_FRAMES):
            if rolls[roll] == 10:
                score += 10 + rolls[roll + 1] + rolls[roll + 2]
                roll += 1
            elif rolls[roll] + rolls[roll + 1] == 10:
                score += 10 + rolls[roll + 2]
                roll += 2
            else:
                score += rolls[roll] + rolls[roll + 1]
                roll += 2
        return score