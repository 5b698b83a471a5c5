"""
Game Service

Session loop state machine for a single game: validates guesses, scores them,
keeps the history and tried-letter tracker, and decides when the game ends.
"""

import uuid
from typing import List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH, WordList
from ..models.errors import (
    ConfigurationError, GameOverError, InvalidLengthError, UnknownWordError
)
from ..models.game import GameScore, GameState, GuessResult, LetterStatus, SessionStatus
from .scoring import LetterTracker, evaluate_guess


class GameSession:
    """
    One game against a fixed target word.

    This class handles:
    - Guess validation (length, word list membership)
    - Guess evaluation through the scoring engine
    - Guess history and tried-letter tracking
    - Win / loss transitions
    """

    def __init__(self, target: str, word_list: WordList, max_guesses: int = MAX_ROUNDS,
                 word_length: Optional[int] = None):
        target = target.strip().upper()
        if word_length is not None and len(target) != word_length:
            raise ConfigurationError(
                f"Your manual word {target} is not {word_length} letters long"
            )
        if max_guesses < 1:
            raise ConfigurationError(f"Number of tries must be at least 1, got {max_guesses}")

        self.game_id = str(uuid.uuid4())
        self.target = target
        self.word_length = len(target)
        self.word_list = word_list
        self.max_guesses = max_guesses
        self.history: List[GuessResult] = []
        self.tracker = LetterTracker()
        self.status = SessionStatus.AWAITING_GUESS

    @property
    def guesses_used(self) -> int:
        return len(self.history)

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - self.guesses_used

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    @staticmethod
    def normalize(guess: str) -> str:
        return guess.strip().upper()

    def _validate(self, guess: str) -> None:
        if len(guess) != self.word_length:
            raise InvalidLengthError(
                f"The word you entered was {len(guess)} letters. "
                f"You need a word with {self.word_length} letters",
                guess
            )

        # The target is always accepted so a manual answer outside the list can win
        if guess != self.target and guess not in self.word_list:
            raise UnknownWordError(
                f"{guess} not found in list. "
                f"Please guess a valid {self.word_length} letter word from the wordlist",
                guess
            )

    def submit_guess(self, guess: str) -> GuessResult:
        """
        Processes a guess and updates the session.

        Args:
            guess: Raw player input

        Returns:
            GuessResult for the accepted guess

        Raises:
            GameOverError: If the session is already won or lost
            InvalidLengthError: If the guess has the wrong number of letters
            UnknownWordError: If the guess is not in the word list
        """
        if self.game_over:
            raise GameOverError("Game is already over")

        normalized_guess = self.normalize(guess)
        self._validate(normalized_guess)

        result = evaluate_guess(normalized_guess, self.target)
        self.history.append(result)
        self.tracker.record(result)

        if normalized_guess == self.target:
            self.status = SessionStatus.WON
        elif self.guesses_used >= self.max_guesses:
            self.status = SessionStatus.LOST

        return result

    def answer_result(self) -> GuessResult:
        """The target with every letter Correct, for the loss reveal."""
        return GuessResult.all_correct(self.target)

    def score(self) -> GameScore:
        return GameScore(
            guesses=self.guesses_used,
            letters_tried=self.tracker.count(),
            letters_absent=self.tracker.count(LetterStatus.ABSENT)
        )

    def get_game_state(self) -> GameState:
        """
        Returns the current session state, revealing the answer only once the
        game is over.
        """
        return GameState(
            game_id=self.game_id,
            current_round=self.guesses_used,
            max_rounds=self.max_guesses,
            status=self.status,
            guesses=[result.word for result in self.history],
            guess_results=list(self.history),
            letter_status=self.tracker.snapshot(),
            answer=self.target if self.game_over else None
        )


def create_session(word_list: WordList, max_guesses: int = MAX_ROUNDS,
                   answer: Optional[str] = None, rng=None,
                   word_length: int = WORD_LENGTH) -> GameSession:
    """
    Start a session against `answer`, or a random word from the list.

    Raises:
        ConfigurationError: If a manual answer has the wrong length or the
            number of tries is not positive
    """
    if answer:
        return GameSession(answer, word_list, max_guesses, word_length=word_length)
    return GameSession(word_list.random_word(rng), word_list, max_guesses)
