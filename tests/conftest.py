import io

import pytest

from wordle_term.config.game_settings import WordList
from wordle_term.controllers.game_controller import GameController
from wordle_term.services.game_service import GameSession
from wordle_term.utils.game_logger import GameLogger
from wordle_term.utils.terminal_renderer import TerminalRenderer

WORDS = [
    "ALLOW", "CRANE", "SLATE", "MANGO", "HOUSE", "LLAMA", "SPEED", "ABBEY",
    "EERIE", "GEESE", "THEME", "HELLO", "WORLD", "ROBOT", "ERASE",
]


@pytest.fixture
def word_list():
    return WordList(WORDS)


@pytest.fixture
def logger():
    return GameLogger()


@pytest.fixture
def make_session(word_list):
    def factory(target="CRANE", max_guesses=6):
        return GameSession(target, word_list, max_guesses)
    return factory


@pytest.fixture
def play(make_session, logger):
    """Run a full game from scripted input lines; returns (session, output, status)."""
    def runner(lines, target="CRANE", max_guesses=6, hide_answer=False, blank=False):
        session = make_session(target, max_guesses)
        stdin = io.StringIO("".join(line + "\n" for line in lines))
        stdout = io.StringIO()
        controller = GameController(
            session, TerminalRenderer(blank=blank), stdin, stdout,
            hide_answer=hide_answer, logger=logger
        )
        status = controller.run()
        return session, stdout.getvalue(), status
    return runner
