"""
Game Controller

Console loop for one session: reads guesses, feeds them to the session and
prints the results.
"""

import logging
import sys
from typing import Optional, TextIO

from ..models.errors import InputStreamError, InvalidGuessError
from ..models.game import SessionStatus
from ..services.game_service import GameSession
from ..utils.game_logger import GameLogger, game_logger
from ..utils.terminal_renderer import TerminalRenderer


class GameController:
    """Drives a GameSession from a line-oriented input stream."""

    def __init__(self,
                 session: GameSession,
                 renderer: Optional[TerminalRenderer] = None,
                 input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None,
                 hide_answer: bool = False,
                 logger: Optional[GameLogger] = None):
        self.session = session
        self.renderer = renderer or TerminalRenderer()
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.hide_answer = hide_answer
        self.logger = logger or game_logger

    def _write(self, text: str = "", end: str = "\n") -> None:
        self.output_stream.write(text + end)
        self.output_stream.flush()

    def read_guess(self) -> str:
        """
        Prompt for and read one line.

        Raises:
            InputStreamError: If the stream is closed or reading fails
        """
        self._write(self.renderer.prompt(self.session.guesses_used + 1, self.session.max_guesses), end="")
        try:
            line = self.input_stream.readline()
        except (OSError, ValueError) as e:
            raise InputStreamError(f"Failed to read guess: {e}") from e
        if not line:
            raise InputStreamError("Input closed before the game finished")
        return line.rstrip("\r\n")

    def start(self, show_answer: bool = False) -> None:
        self.logger.log_game_event(
            self.session.game_id, 'new_game',
            word_length=self.session.word_length, max_rounds=self.session.max_guesses
        )
        if show_answer:
            self._write(f"Selected word {self.session.target}")

    def play_turn(self) -> bool:
        """
        Read and submit one guess.

        Returns:
            bool: True if the guess was accepted, False if it was rejected
        """
        guess = self.read_guess()
        try:
            result = self.session.submit_guess(guess)
        except InvalidGuessError as e:
            self.logger.log_user_action(
                'submit_guess', self.session.game_id, success=False,
                guess=e.guess, error_type=type(e).__name__, reason=e.reason
            )
            self._write(e.reason)
            return False

        self.logger.log_user_action(
            'submit_guess', self.session.game_id,
            guess=result.word, round=self.session.guesses_used,
            statuses=[status.name for status in result.statuses]
        )
        self._write(self.renderer.guess_line(result, self.session.tracker.tried_letters()))
        return True

    def finish(self) -> None:
        state = self.session.get_game_state()
        if state.status is SessionStatus.WON:
            score = self.session.score()
            self.logger.log_game_event(
                state.game_id, 'game_won',
                answer=state.answer, rounds=state.current_round, score=score.total
            )
            self._write(self.renderer.win_summary(state.guess_results, score))
        else:
            self.logger.log_game_event(
                state.game_id, 'game_lost',
                answer=state.answer, rounds=state.current_round
            )
            self._write(self.renderer.loss_summary(
                self.session.answer_result(), reveal=not self.hide_answer
            ))

    def run(self, show_answer: bool = False) -> SessionStatus:
        """
        Play the session to completion.

        Raises:
            InputStreamError: If input ends or fails before the game is over
        """
        self.start(show_answer)
        try:
            while not self.session.game_over:
                self.play_turn()
        except InputStreamError as e:
            self.logger.log_error(e, 'read_guess', self.session.game_id, level=logging.INFO)
            raise
        self.finish()
        return self.session.status
