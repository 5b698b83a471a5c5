"""
Configuration Package

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: Game rules, constants and the word list loader
"""

from .app_config import Config
from .game_settings import (
    WORD_LENGTH, MAX_ROUNDS, DEFAULT_WORD_LIST_PATH, WordList,
    parse_word_list, load_word_list
)

__all__ = [
    # App configuration
    'Config',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'DEFAULT_WORD_LIST_PATH', 'WordList',
    'parse_word_list', 'load_word_list'
]
