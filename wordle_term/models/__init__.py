"""
Data Models Package

Contains all data models, enums and errors used throughout the application.
"""

from .game import GameScore, GameState, GuessResult, LetterStatus, SessionStatus
from .errors import (
    WordleError, InvalidGuessError, InvalidLengthError, UnknownWordError,
    GameOverError, InputStreamError, ConfigurationError
)

__all__ = [
    'GameScore', 'GameState', 'GuessResult', 'LetterStatus', 'SessionStatus',
    'WordleError', 'InvalidGuessError', 'InvalidLengthError', 'UnknownWordError',
    'GameOverError', 'InputStreamError', 'ConfigurationError'
]
