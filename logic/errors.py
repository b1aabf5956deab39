"""
Errors raised by the TicTacToe game logic.

Illegal moves (occupied cell, game over, agent still thinking) are NOT
errors - they are rejected with a ValidationResult and ignored.
Only programming mistakes raise.
"""


class GameError(Exception):
    """Base class for all game logic errors."""


class InvalidIndexError(GameError, IndexError):
    """A cell index outside 0-8 was passed in."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"Invalid cell index {index!r}. Must be 0-8.")


class InvariantViolation(GameError, RuntimeError):
    """The controller reached a state that correct play can never produce."""
