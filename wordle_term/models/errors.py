"""
Game Errors

Recoverable guess errors are reported to the player and re-prompted;
everything else ends the program.
"""


class WordleError(Exception):
    """Base class for all game errors."""


class InvalidGuessError(WordleError):
    """A guess was rejected without consuming a try."""

    def __init__(self, reason: str, guess: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.guess = guess


class InvalidLengthError(InvalidGuessError):
    pass


class UnknownWordError(InvalidGuessError):
    pass


class GameOverError(WordleError):
    """Guess submitted to a session that has already been won or lost."""


class InputStreamError(WordleError):
    """Reading the next guess failed or the input was closed."""


class ConfigurationError(WordleError):
    """Invalid startup settings such as a manual answer of the wrong length."""
