"""
Command-line entry point.

Builds the word list, session, renderer and controller explicitly and plays
one game.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

import colorama

from . import __version__, create_game
from .config import Config, WORD_LENGTH
from .models.errors import ConfigurationError, InputStreamError
from .utils.game_logger import game_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordle-term',
        description=f"Guess the hidden {WORD_LENGTH}-letter word in the terminal."
    )
    parser.add_argument('-t', '--tries', type=int, default=None,
                        help="number of tries (default: MAX_ROUNDS from the environment, else 6)")
    parser.add_argument('-s', '--show', action='store_true',
                        help="show word")
    parser.add_argument('-b', '--blank', action='store_true',
                        help="show try results with no letters")
    parser.add_argument('-H', '--hide-answer', action='store_true',
                        help="hide answer at end if not guessed")
    parser.add_argument('-u', '--use-answer', default='', metavar='WORD',
                        help="use provided answer")
    parser.add_argument('--words', default=Config.WORD_LIST_PATH or None, metavar='PATH',
                        help="newline-delimited word list to use instead of the bundled one")
    parser.add_argument('--seed', type=int, default=None,
                        help="random seed for a reproducible answer")
    parser.add_argument('--log-level', default=Config.LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], type=str.upper,
                        help="log level (default: %(default)s)")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None,
         input_stream: Optional[TextIO] = None,
         output_stream: Optional[TextIO] = None) -> int:
    """
    Run one game.

    Returns:
        int: 0 when the game finishes (won or lost), 1 on a configuration or
        input error, 130 when interrupted
    """
    args = build_parser().parse_args(argv)
    output_stream = output_stream or sys.stdout

    game_logger.configure(log_dir=Config.LOG_DIR or None, level=args.log_level)
    colorama.just_fix_windows_console()

    try:
        controller = create_game(
            tries=args.tries,
            answer=args.use_answer,
            word_list_path=args.words,
            blank=args.blank,
            hide_answer=args.hide_answer,
            rng=random.Random(args.seed) if args.seed is not None else None,
            input_stream=input_stream,
            output_stream=output_stream,
        )
    except ConfigurationError as e:
        game_logger.log_error(e, 'configure', level=logging.INFO)
        print(f"{e}. Exiting", file=sys.stderr)
        return 1

    try:
        status = controller.run(show_answer=args.show)
    except InputStreamError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        output_stream.write("\n")
        return 130

    game_logger.logger.debug(f"Session finished with status {status.value}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
