"""
Services Package

Contains the scoring engine and the game session.
"""

from .scoring import evaluate_guess, LetterTracker
from .game_service import GameSession, create_session

__all__ = ['evaluate_guess', 'LetterTracker', 'GameSession', 'create_session']
