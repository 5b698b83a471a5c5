"""
Scoring Engine

Pure guess evaluation plus the per-session tracker of tried letters.
"""

import string
from collections import Counter
from typing import Dict, Iterator, List, Optional, Tuple

from ..models.errors import InvalidLengthError
from ..models.game import GuessResult, LetterStatus


def evaluate_guess(guess: str, target: str) -> GuessResult:
    """
    Score a guess against the target word.

    Exact position matches are marked first. The remaining positions are then
    scanned from the last to the first, and each takes one still-unclaimed
    occurrence of its letter in the target if there is one. When the guess
    repeats a letter more often than the target can cover, the rightmost
    repeats are therefore marked PRESENT and the leftmost ones ABSENT:

        >>> [s.name for s in evaluate_guess("LLAMA", "ALLOW").statuses]
        ['PRESENT', 'CORRECT', 'ABSENT', 'ABSENT', 'PRESENT']

    Args:
        guess: Uppercase guess
        target: Uppercase target of the same length

    Returns:
        GuessResult with one (letter, status) pair per position
    """
    if len(guess) != len(target):
        raise InvalidLengthError(
            f"Guess has {len(guess)} letters but the target has {len(target)}", guess
        )

    statuses: List[LetterStatus] = [LetterStatus.ABSENT] * len(guess)
    unclaimed = Counter(target)

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            statuses[i] = LetterStatus.CORRECT
            unclaimed[g] -= 1

    # Second pass, back to front: misplaced letters
    for i in range(len(guess) - 1, -1, -1):
        letter = guess[i]
        if statuses[i] is not LetterStatus.CORRECT and unclaimed[letter] > 0:
            statuses[i] = LetterStatus.PRESENT
            unclaimed[letter] -= 1

    return GuessResult(guess, tuple(zip(guess, statuses)))


class LetterTracker:
    """
    Best status seen for each letter across a session.

    A letter's status only ever moves up ABSENT < PRESENT < CORRECT.
    Untried letters have no entry.
    """

    ALPHABET = string.ascii_uppercase

    def __init__(self):
        self.letter_status: Dict[str, LetterStatus] = {}

    def record(self, result: GuessResult) -> None:
        """Merge a scored guess into the tracker."""
        for letter, status in result.evaluations:
            current = self.letter_status.get(letter)
            if current is None or status > current:
                self.letter_status[letter] = status

    def get(self, letter: str) -> Optional[LetterStatus]:
        return self.letter_status.get(letter)

    def tried_letters(self) -> List[Tuple[str, LetterStatus]]:
        """Tried letters in alphabetical order."""
        return [(letter, self.letter_status[letter])
                for letter in self.ALPHABET if letter in self.letter_status]

    def count(self, status: Optional[LetterStatus] = None) -> int:
        """Number of tried letters, or of those currently at `status`."""
        if status is None:
            return len(self.letter_status)
        return sum(1 for s in self.letter_status.values() if s is status)

    def snapshot(self) -> Dict[str, LetterStatus]:
        return dict(self.letter_status)

    def __iter__(self) -> Iterator[Tuple[str, LetterStatus]]:
        return iter(self.tried_letters())

    def __len__(self) -> int:
        return len(self.letter_status)
