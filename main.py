"""
Terminal Word Guessing Game - Main Entry Point

Run with `python main.py --help` for options.
"""

import sys

from wordle_term.cli import main

if __name__ == '__main__':
    sys.exit(main())
