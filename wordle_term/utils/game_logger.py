"""
Game Logger Module

Structured logging of player actions, game events and errors. Every entry is
a JSON object so a day's log file can be parsed line by line.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Player action tracking (guesses accepted and rejected)
    - Game event logging (new game, win, loss)
    - JSON structured logs for easy parsing
    - Console output at the configured level (warnings and errors by default)
    - Optional daily log file that always records INFO and above
    """

    LOGGER_NAME = 'wordle_game'

    def __init__(self, log_dir: Optional[str] = None, level: str = 'WARNING'):
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the game logger with console and optional file handlers."""
        logger = logging.getLogger(self.LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # Console threshold follows `level`; the log file always gets INFO and above
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def configure(self, log_dir: Optional[str] = None, level: str = 'WARNING') -> 'GameLogger':
        """Rebuild handlers, e.g. once command-line options are known."""
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)
        return self

    @property
    def log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        action: str,
                        game_id: Optional[str] = None,
                        success: bool = True,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g. 'submit_guess')
            game_id: Game identifier if applicable
            success: False for rejected input, logged at INFO as well since
                rejections are part of normal play
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            **kwargs
        }
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_game_event(self,
                       game_id: str,
                       event: str,
                       **kwargs):
        """
        Log game-specific events.

        Args:
            game_id: Game identifier
            event: Type of game event (e.g. 'new_game', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None,
                  level: int = logging.ERROR):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
            level: Pass logging.INFO for errors already reported to the
                player so the console does not repeat them
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.log(level, self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger()
