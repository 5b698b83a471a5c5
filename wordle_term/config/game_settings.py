"""
Game Configuration Constants Module

Game rules and the word list loader. The word list is read once at startup
and handed to the session as an immutable, sorted WordList.
"""

import bisect
import os
import random
from typing import Final, Iterable, Optional, Tuple

from ..models.errors import ConfigurationError

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every target word and guess.
"""

MAX_ROUNDS: Final[int] = 6
"""
Default number of guess attempts allowed per game.
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)


class WordList:
    """
    Sorted, deduplicated vocabulary of valid words.

    Membership is a binary search over the sorted tuple.
    """

    def __init__(self, words: Iterable[str]):
        self._words: Tuple[str, ...] = tuple(sorted(set(words)))

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        i = bisect.bisect_left(self._words, word)
        return i < len(self._words) and self._words[i] == word

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        """Pick a target word, using `rng` when given for reproducible games."""
        if not self._words:
            raise ConfigurationError("Word list is empty")
        return (rng or random).choice(self._words)


def parse_word_list(lines: Iterable[str], word_length: int = WORD_LENGTH) -> WordList:
    """
    Normalize raw lines into a WordList.

    Entries are trimmed and uppercased; anything that is not exactly
    `word_length` alphabetic characters is dropped.
    """
    words = []
    for line in lines:
        word = line.strip().upper()
        if len(word) == word_length and word.isalpha():
            words.append(word)
    return WordList(words)


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> WordList:
    """
    Load the word list from a newline-delimited text file.

    Args:
        path: File to read; the bundled words.txt when None or empty
        word_length: Required length of each entry

    Returns:
        WordList: Sorted, deduplicated uppercase words

    Raises:
        ConfigurationError: If the file cannot be read or yields no words
    """
    file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            word_list = parse_word_list(f, word_length)
    except OSError as e:
        raise ConfigurationError(f"Word list file could not be read: {file_path} ({e.strerror})") from e

    if not word_list:
        raise ConfigurationError(f"Word list {file_path} has no {word_length}-letter words")

    return word_list
