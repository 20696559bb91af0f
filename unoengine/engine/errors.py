"""Failures raised by the game engine.

Every operation either returns a new GameState or raises one of these.
The input state is never modified, so the caller's snapshot stays valid
after a failure.
"""

from typing import Optional


class UnoError(ValueError):
    """Base class for engine failures."""


class SetupFailure(UnoError):
    """The game could not be created."""


class TurnViolation(UnoError):
    """An action was attempted by a player whose turn it is not."""

    def __init__(self, player_index: int, current_index: int, message: Optional[str] = None):
        self.player_index = player_index
        self.current_index = current_index
        super().__init__(
            message or f"Not player {player_index}'s turn (current player is {current_index})"
        )


class ActionMismatch(UnoError):
    """The operation does not match the action the game is waiting for."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Cannot {expected.value} now. Required action: {actual.value}")


class InvalidSelection(UnoError):
    """Bad hand index, unplayable card, or WILD chosen as a color."""
