import io

from wordle_term.cli import build_parser, main
from wordle_term.config.app_config import Config
from wordle_term.utils.game_logger import game_logger


def test_defaults():
    args = build_parser().parse_args([])
    assert args.tries is None
    assert not args.show and not args.blank and not args.hide_answer
    assert args.use_answer == ""


def test_short_options():
    args = build_parser().parse_args(["-t", "3", "-s", "-b", "-H", "-u", "crane"])
    assert args.tries == 3
    assert args.show and args.blank and args.hide_answer
    assert args.use_answer == "crane"


def test_manual_answer_game_is_won():
    stdout = io.StringIO()
    code = main(["-u", "crane"], io.StringIO("slate\ncrane\n"), stdout)
    assert code == 0
    assert "You guessed right!" in stdout.getvalue()


def test_manual_answer_wrong_length_exits_non_zero(capsys):
    stdout = io.StringIO()
    code = main(["-u", "toolong"], io.StringIO("crane\n"), stdout)
    assert code == 1
    assert capsys.readouterr().err == "Your manual word TOOLONG is not 5 letters long. Exiting\n"
    assert stdout.getvalue() == ""


def test_zero_tries_exits_non_zero():
    assert main(["-t", "0", "-u", "crane"], io.StringIO(""), io.StringIO()) == 1


def test_closed_input_exits_non_zero(capsys):
    code = main(["-u", "crane"], io.StringIO("slate\n"), io.StringIO())
    assert code == 1
    assert capsys.readouterr().err == "\nInput closed before the game finished\n"


def test_loss_with_seeded_answer_and_custom_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("mango\nhouse\n", encoding="utf-8")
    stdout = io.StringIO()
    code = main(["--words", str(path), "-t", "1", "-u", "mango"],
                io.StringIO("house\n"), stdout)
    assert code == 0
    assert "Better luck next time!" in stdout.getvalue()


def test_seed_picks_answer_from_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("mango\n", encoding="utf-8")
    stdout = io.StringIO()
    code = main(["--words", str(path), "--seed", "3", "-s"], io.StringIO("mango\n"), stdout)
    assert code == 0
    assert "Selected word MANGO" in stdout.getvalue()


def test_default_tries_come_from_environment(monkeypatch):
    monkeypatch.setattr(Config, "MAX_ROUNDS", "2")
    stdout = io.StringIO()
    assert main(["-u", "mango"], io.StringIO("house\ncrane\n"), stdout) == 0
    assert "Enter your guess (2/2): " in stdout.getvalue()
    assert "Better luck next time!" in stdout.getvalue()


def test_non_numeric_max_rounds_exits_non_zero(monkeypatch, capsys):
    monkeypatch.setattr(Config, "MAX_ROUNDS", "six")
    assert main(["-u", "crane"], io.StringIO("crane\n"), io.StringIO()) == 1
    assert "MAX_ROUNDS must be a whole number" in capsys.readouterr().err


def test_log_dir_records_game_at_default_level(monkeypatch, tmp_path):
    monkeypatch.setattr(Config, "LOG_DIR", str(tmp_path))
    code = main(["-u", "crane"], io.StringIO("slate\ncrane\n"), io.StringIO())
    assert code == 0

    content = game_logger.log_file.read_text(encoding="utf-8")
    game_logger.configure()
    assert '"action": "new_game"' in content
    assert content.count('"action": "submit_guess"') == 2
    assert '"action": "game_won"' in content
