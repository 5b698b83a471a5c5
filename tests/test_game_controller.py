import io
import json
import logging

import pytest

from wordle_term.controllers.game_controller import GameController
from wordle_term.models.errors import InputStreamError
from wordle_term.models.game import SessionStatus
from wordle_term.utils.terminal_renderer import TerminalRenderer


def test_winning_game(play):
    session, output, status = play(["slate", "crane"])
    assert status is SessionStatus.WON
    assert session.guesses_used == 2
    assert "Enter your guess (1/6): " in output
    assert "Enter your guess (2/6): " in output
    assert "You guessed right!" in output
    assert "Your score is 10, 2 guesses and 8 letters tried" in output


def test_losing_game_reveals_answer(play):
    session, output, status = play(["house"], target="MANGO", max_guesses=1)
    assert status is SessionStatus.LOST
    assert "Better luck next time!" in output
    assert "The correct word is : " in output
    assert " M " in output.split("The correct word is : ")[1]


def test_losing_game_can_hide_answer(play):
    _, output, status = play(["house"], target="MANGO", max_guesses=1, hide_answer=True)
    assert status is SessionStatus.LOST
    assert "The correct word is" not in output


def test_rejected_input_repeats_prompt(play):
    session, output, status = play(["ab", "zzzzz", "crane"])
    assert status is SessionStatus.WON
    assert session.guesses_used == 1
    assert output.count("Enter your guess (1/6): ") == 3
    assert "The word you entered was 2 letters. You need a word with 5 letters" in output
    assert "ZZZZZ not found in list" in output


def test_blank_mode_hides_letters_in_final_matrix(play):
    _, output, _ = play(["crane"], blank=True)
    matrix = output.split("Your wordle matrix is: ")[1].split("Your score")[0]
    assert "C" not in matrix
    assert "   " in matrix


def test_closed_input_is_input_stream_error(make_session, logger):
    session = make_session()
    controller = GameController(session, TerminalRenderer(), io.StringIO("slate\n"),
                                io.StringIO(), logger=logger)
    with pytest.raises(InputStreamError):
        controller.run()
    assert session.guesses_used == 1
    assert session.status is SessionStatus.AWAITING_GUESS


def test_read_failure_is_input_stream_error(make_session, logger):
    stream = io.StringIO()
    stream.close()
    controller = GameController(make_session(), TerminalRenderer(), stream,
                                io.StringIO(), logger=logger)
    with pytest.raises(InputStreamError):
        controller.read_guess()


def test_show_answer_prints_target(make_session, logger):
    stdout = io.StringIO()
    controller = GameController(make_session("CRANE"), TerminalRenderer(),
                                io.StringIO("crane\n"), stdout, logger=logger)
    controller.run(show_answer=True)
    assert "Selected word CRANE" in stdout.getvalue()


def test_turns_are_logged(play, caplog):
    with caplog.at_level(logging.INFO, logger="wordle_game"):
        session, _, _ = play(["ab", "crane"])

    entries = [json.loads(record.getMessage()) for record in caplog.records]
    actions = [entry["action"] for entry in entries]
    assert actions == ["new_game", "submit_guess", "submit_guess", "game_won"]
    assert all(entry["details"]["game_id"] == session.game_id for entry in entries)

    rejected, accepted = entries[1], entries[2]
    assert rejected["details"]["success"] is False
    assert rejected["details"]["error_type"] == "InvalidLengthError"
    assert accepted["details"]["statuses"] == ["CORRECT"] * 5
    assert "answer" not in entries[0]["details"]
    assert entries[3]["details"]["answer"] == "CRANE"
