import pytest

from wordle_solver.cli import run_games
from wordle_solver.cli.assist import assist
from wordle_solver.cli.play import play
from wordle_solver.constraints import CandidateEngine
from wordle_solver.game import WordleGame

WORDS = ["crane", "slate", "trace", "apple", "grace", "brace", "beach", "adieu", "crate", "drake"]


def _scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_assist_follows_suggestions_to_the_answer(capsys):
    engine = CandidateEngine(5, list(WORDS))
    # play the suggested 'trace', report its feedback against 'crane'
    read = _scripted("", "bggyg", "", "ggggg")
    assert assist(engine, read, suggestion="trace") == "crane"
    out = capsys.readouterr().out
    assert "Remaining candidates: 1" in out
    assert "Suggested next guess: crane" in out
    assert "Solved!" in out


def test_assist_reprompts_bad_input(capsys):
    engine = CandidateEngine(5, list(WORDS))
    read = _scripted("cr4ne", "trace", "xx", "bggyg", "quit")
    assert assist(engine, read) is None
    out = capsys.readouterr().out
    assert "Please enter a 5-letter alphabetic word." in out
    assert "Invalid feedback:" in out
    assert "bye!" in out


def test_assist_reports_dead_end(capsys):
    engine = CandidateEngine(5, list(WORDS))
    read = _scripted("slate", "bbbbb")
    # every candidate holds an a or an e
    assert assist(engine, read) is None
    assert "No candidates remain" in capsys.readouterr().out


def test_assist_accepts_published_game_feedback(capsys):
    engine = CandidateEngine(5, ["crane", "slate", "brace"])
    # the published game scores "eerie" against "crane" as gray, gray, yellow, gray, green
    read = _scripted("eerie", "bbybg", "quit")
    assert assist(engine, read) is None
    out = capsys.readouterr().out
    assert "Remaining candidates: 2" in out
    assert "No candidates remain" not in out
    assert "crane" in engine.words()


def test_play_until_solved(capsys):
    game = WordleGame("crane")
    read = _scripted("zzzzz", "trace", "crane")
    record = play(game, set(WORDS), read, clear=False)
    assert record is not None
    assert record.guesses == ("trace", "crane")
    assert record.win
    assert "Please enter a known 5-letter word." in capsys.readouterr().out


def test_play_quit():
    game = WordleGame("crane")
    assert play(game, set(WORDS), _scripted("exit"), clear=False) is None
    assert not game.is_over


@pytest.fixture
def counts_file(tmp_path):
    path = tmp_path / "counts.txt"
    path.write_text("".join(f"{w}\t{w}\tNN\t{100 - i}\n" for i, w in enumerate(WORDS)))
    return path


def test_run_games_prints_records_and_tally(counts_file, capsys):
    run_games.main(["3", "--no-download", "--words-file", str(counts_file), "--guesses", "10", "--seed", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert sum("WIN: True" in line for line in lines) == 3
    tally_line = lines[3]
    assert tally_line.startswith("[0, ")
    assert len(tally_line.strip("[]").split(",")) == 11


def test_run_games_rejects_non_positive_iterations(counts_file):
    with pytest.raises(SystemExit):
        run_games.main(["0", "--no-download", "--words-file", str(counts_file)])
