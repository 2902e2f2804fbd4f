"""Players and their running totals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """A participant with a score and a count of consecutive passes."""

    name: str
    score: int = 0
    pass_count: int = 0

    def add_score(self, points: int) -> None:
        """Add ``points`` to the score."""
        self.score += points

    def increment_pass(self) -> None:
        """Record one more skipped turn."""
        self.pass_count += 1

    def reset_pass(self) -> None:
        """Forget the run of skipped turns."""
        self.pass_count = 0