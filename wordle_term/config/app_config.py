"""
Configuration Management Module

Runtime settings loaded from environment variables with sensible defaults.
A .env file in the working directory is picked up if present; command-line
flags take precedence over anything set here.
"""

import os
from dotenv import load_dotenv

from ..models.errors import ConfigurationError

load_dotenv()


class Config:
    """Base configuration class with all settings."""

    # Game Settings
    MAX_ROUNDS = os.getenv('MAX_ROUNDS', '6')
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', '')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
    LOG_DIR = os.getenv('LOG_DIR', '')

    @classmethod
    def max_rounds(cls) -> int:
        """MAX_ROUNDS as an int, checked when a game starts rather than on import."""
        try:
            return int(cls.MAX_ROUNDS)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"MAX_ROUNDS must be a whole number, got {cls.MAX_ROUNDS!r}"
            ) from None
