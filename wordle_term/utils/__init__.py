"""
Utilities Package

Contains the terminal renderer and the structured game logger.
"""

from .game_logger import game_logger, GameLogger
from .terminal_renderer import TerminalRenderer

__all__ = ['game_logger', 'GameLogger', 'TerminalRenderer']
