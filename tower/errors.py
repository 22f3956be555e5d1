"""Exceptions raised by the board and the game loop."""


class TowerError(Exception):
    """Base class for everything the puzzle raises."""


class IllegalMoveError(TowerError):
    """A move was applied to the board without checking it first."""


class EndOfInput(TowerError):
    """The input provider has no more lines. Ends the run quietly."""


class RetriesExhausted(TowerError):
    """
    The player used up a prompt's retry budget.

    The exception message is the farewell shown to the player.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
