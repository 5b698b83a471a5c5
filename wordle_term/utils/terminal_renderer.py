"""
Terminal Renderer

Turns scored letters into colored fixed-width cells.
"""

from typing import Iterable, Tuple

from colorama import Back, Fore, Style

from ..models.game import GameScore, GuessResult, LetterStatus

BACKGROUNDS = {
    LetterStatus.CORRECT: Back.GREEN,
    LetterStatus.PRESENT: Back.YELLOW,
    LetterStatus.ABSENT: Back.LIGHTBLACK_EX,
}

FOREGROUNDS = {
    LetterStatus.CORRECT: Fore.GREEN,
    LetterStatus.PRESENT: Fore.YELLOW,
    LetterStatus.ABSENT: Fore.LIGHTBLACK_EX,
}


class TerminalRenderer:
    """
    Formats guesses, tried letters and end-of-game summaries.

    Blank mode hides the letters of the final guess matrix so it can be
    shared without giving the word away. Rows printed during play always
    show their letters.
    """

    def __init__(self, blank: bool = False):
        self.blank = blank

    @staticmethod
    def cell(letter: str, status: LetterStatus, blank: bool = False) -> str:
        if blank:
            return f"{BACKGROUNDS[status]}{FOREGROUNDS[status]}   {Style.RESET_ALL}"
        return f"{Style.BRIGHT}{BACKGROUNDS[status]} {letter} {Style.RESET_ALL}"

    def row(self, letters: Iterable[Tuple[str, LetterStatus]], blank: bool = False) -> str:
        return "".join(self.cell(letter, status, blank) for letter, status in letters)

    def prompt(self, attempt: int, max_attempts: int) -> str:
        return f"Enter your guess ({attempt}/{max_attempts}): "

    def guess_line(self, result: GuessResult, tried: Iterable[Tuple[str, LetterStatus]]) -> str:
        """`Guess <row> Tried <letters>` shown after each accepted guess."""
        return (f"{Style.BRIGHT}Guess {Style.RESET_ALL}{self.row(result.evaluations)}"
                f"{Style.BRIGHT} Tried {Style.RESET_ALL}{self.row(tried)}")

    def win_summary(self, history: Iterable[GuessResult], score: GameScore) -> str:
        lines = [f"\n{Style.BRIGHT}{Fore.RED}You guessed right!{Style.RESET_ALL}",
                 "Your wordle matrix is: "]
        lines.extend(self.row(result.evaluations, self.blank) for result in history)
        lines.append("")
        lines.append(f"Your score is {score.total}, {score.guesses} guesses and "
                     f"{score.letters_tried} letters tried ({score.letters_absent} not in the word)")
        return "\n".join(lines)

    def loss_summary(self, answer: GuessResult, reveal: bool = True) -> str:
        lines = [f"\n{Style.BRIGHT}Better luck next time!{Style.RESET_ALL}"]
        if reveal:
            lines.append(f"The correct word is : {self.row(answer.evaluations)}")
        return "\n".join(lines)
