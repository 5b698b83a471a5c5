"""
Terminal Word Guessing Game Package

A single player guesses a hidden five-letter word within a limited number of
tries, with per-letter color feedback after every guess.
"""

__version__ = "1.0.0"

from .config import Config, WORD_LENGTH, load_word_list
from .controllers.game_controller import GameController
from .services.game_service import create_session
from .utils.terminal_renderer import TerminalRenderer


def create_game(tries=None, answer=None, word_list_path=None, blank=False,
                hide_answer=False, rng=None, input_stream=None, output_stream=None,
                word_list=None):
    """
    Factory for a ready-to-run game controller.

    Args:
        tries: Maximum guesses, Config.max_rounds() when None
        answer: Manual target word; a random word from the list when empty
        word_list_path: Word list file, the bundled list when None
        word_list: Preloaded WordList, skips loading from disk

    Returns:
        GameController wired to a new session

    Raises:
        ConfigurationError: If the word list is unusable, MAX_ROUNDS is not
            a number, the manual answer has the wrong length, or tries is
            not positive
    """
    if word_list is None:
        word_list = load_word_list(word_list_path, WORD_LENGTH)
    session = create_session(
        word_list,
        max_guesses=Config.max_rounds() if tries is None else tries,
        answer=answer,
        rng=rng,
        word_length=WORD_LENGTH,
    )
    return GameController(
        session,
        renderer=TerminalRenderer(blank=blank),
        input_stream=input_stream,
        output_stream=output_stream,
        hide_answer=hide_answer,
    )
