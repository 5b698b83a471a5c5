"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple


class LetterStatus(IntEnum):
    """
    Letter evaluation status.

    Ordered so a letter's recorded status can be upgraded with max().
    """
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


class SessionStatus(Enum):
    """Session loop states."""
    AWAITING_GUESS = "AWAITING_GUESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.AWAITING_GUESS


@dataclass(frozen=True)
class GuessResult:
    """One scored guess: a (letter, status) pair per position."""
    word: str
    evaluations: Tuple[Tuple[str, LetterStatus], ...]

    @property
    def statuses(self) -> Tuple[LetterStatus, ...]:
        return tuple(status for _, status in self.evaluations)

    @property
    def is_correct(self) -> bool:
        return all(status is LetterStatus.CORRECT for _, status in self.evaluations)

    def count(self, letter: str, *statuses: LetterStatus) -> int:
        """Count positions holding `letter` whose status is one of `statuses`."""
        return sum(1 for guessed, status in self.evaluations
                   if guessed == letter and status in statuses)

    @classmethod
    def all_correct(cls, word: str) -> 'GuessResult':
        """Result with every letter Correct, used to reveal the answer."""
        return cls(word, tuple((letter, LetterStatus.CORRECT) for letter in word))


@dataclass
class GameState:
    """Snapshot of a session for display and logging."""
    game_id: str
    current_round: int
    max_rounds: int
    status: SessionStatus
    guesses: List[str]
    guess_results: List[GuessResult]
    letter_status: Dict[str, LetterStatus]
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def won(self) -> bool:
        return self.status is SessionStatus.WON


@dataclass
class GameScore:
    """End-of-game score: guesses used plus distinct letters tried."""
    guesses: int
    letters_tried: int
    letters_absent: int
    total: int = field(init=False)

    def __post_init__(self):
        self.total = self.guesses + self.letters_tried
