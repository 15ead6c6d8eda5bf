import logging

import pytest

from wordle_solver.constraints import CandidateEngine
from wordle_solver.feedback import score_guess
from wordle_solver.game import WordleGame
from wordle_solver.record import GameRecord
from wordle_solver.solver import WordleSolver, solve

WORDS = ["crane", "slate", "trace", "apple", "grace", "brace", "beach", "adieu", "crate", "drake"]


def test_single_word_list_solves_in_one():
    record = solve(WordleGame("apple"), ["apple"])
    assert record == GameRecord("apple", ("apple",), True)
    assert record.win_index == 1


def test_solves_crane():
    record = solve(WordleGame("crane"), list(WORDS))
    # trace -> [A, C, C, P, C] leaves only crane
    assert record.guesses == ("trace", "crane")
    assert record.win
    assert record.win_index == 2


def test_loses_when_budget_runs_out():
    record = solve(WordleGame("crane", num_guesses=1), list(WORDS))
    assert record.guesses == ("trace",)
    assert not record.win
    assert record.win_index == 0


def test_make_next_guess_submits_to_game():
    game = WordleGame("crane")
    solver = WordleSolver(game, list(WORDS))
    assert solver.make_next_guess() == "trace"
    assert game.guesses() == ["trace"]


def test_rejected_guess_is_an_error():
    # a word of the wrong length can only come from a malformed list
    solver = WordleSolver(WordleGame("crane"), ["cranes"])
    with pytest.raises(RuntimeError):
        solver.make_next_guess()


def test_solver_requires_a_game():
    with pytest.raises(TypeError):
        WordleSolver("crane", list(WORDS))


@pytest.mark.parametrize("hidden", WORDS)
def test_every_word_is_found_with_enough_guesses(hidden):
    # every wrong guess rules itself out, so len(WORDS) guesses always suffice
    record = solve(WordleGame(hidden, num_guesses=len(WORDS)), list(WORDS))
    assert record.win
    assert record.guesses[-1] == hidden
    assert len(set(record.guesses)) == len(record.guesses)


@pytest.mark.parametrize("hidden", WORDS)
def test_filtering_is_sound_and_keeps_the_hidden_word(hidden):
    engine = CandidateEngine(5, list(WORDS))
    game = WordleGame(hidden, num_guesses=len(WORDS))
    while not game.is_over:
        before = len(engine)
        guess = engine.select_next_guess()
        assert len(guess) == 5 and guess in engine.words()
        game.submit_guess(guess)
        scores = game.last_results()
        engine.apply_feedback(guess, scores)

        assert len(engine) <= before
        assert hidden in engine.words()
        for w in engine.words():
            assert score_guess(guess, w) == scores


def test_record_requires_finished_game():
    with pytest.raises(ValueError):
        GameRecord.from_game(WordleGame("crane"), [])


def test_record_text():
    record = GameRecord("crane", ("trace", "crane"), True)
    assert str(record) == "crane\tWIN: True -> [trace, crane]"


def test_finished_game_is_logged_below_info(caplog):
    caplog.set_level(logging.INFO, logger="wordle_solver.solver")
    solve(WordleGame("crane"), list(WORDS))
    assert "WIN" not in caplog.text
