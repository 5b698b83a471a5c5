"""
Controllers Package

Contains the console controller that runs a game session.
"""

from .game_controller import GameController

__all__ = ['GameController']
