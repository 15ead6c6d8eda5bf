import pytest

from wordle_solver.feedback import Score
from wordle_solver.game import STANDARD_GUESSES, GameStatus, WordleGame
from wordle_solver.sampler import WordSampler
from wordle_solver.vocab import WordVocab

A, P, C = Score.ABSENT, Score.PRESENT, Score.CORRECT


def test_new_game_is_empty():
    game = WordleGame("crane")
    assert game.status is GameStatus.IN_PROGRESS
    assert not game.is_over
    assert not game.won
    assert game.num_guesses == STANDARD_GUESSES
    assert game.word_length == 5
    assert game.last_guess_index == -1
    assert game.next_guess_index == 0
    assert game.guesses() == []
    assert game.row(0) == ""


def test_guess_is_placed_and_scored():
    game = WordleGame("crane")
    assert game.submit_guess("slate") is True
    assert game.status is GameStatus.IN_PROGRESS
    assert game.last_guess_index == 0
    assert game.next_guess_index == 1
    assert game.last_guess == "slate"
    assert game.last_results() == [A, A, C, A, C]
    assert game.score_row(0) == game.last_results()
    assert game.score_cell(0, 4) is C


@pytest.mark.parametrize("bad", [None, "cran", "cranes", "cr4ne", 12345])
def test_malformed_guess_is_rejected_without_change(bad):
    game = WordleGame("crane")
    assert game.submit_guess(bad) is False
    assert game.next_guess_index == 0
    assert game.status is GameStatus.IN_PROGRESS


def test_correct_guess_wins():
    game = WordleGame("crane")
    game.submit_guess("slate")
    game.submit_guess("crane")
    assert game.status is GameStatus.WON
    assert game.is_over and game.won
    assert game.guesses() == ["slate", "crane"]


def test_game_is_frozen_after_it_ends():
    game = WordleGame("crane")
    game.submit_guess("crane")
    assert game.submit_guess("brace") is False
    assert game.guesses() == ["crane"]
    assert game.row(1) == ""


def test_running_out_of_guesses_loses():
    game = WordleGame("crane", num_guesses=2)
    assert game.submit_guess("slate")
    assert game.submit_guess("brace")
    assert game.status is GameStatus.LOST
    assert game.is_over and not game.won
    assert game.submit_guess("crane") is False


def test_win_on_the_last_guess():
    game = WordleGame("crane", num_guesses=2)
    game.submit_guess("slate")
    game.submit_guess("crane")
    assert game.status is GameStatus.WON


def test_terminal_within_budget():
    game = WordleGame("crane", num_guesses=3)
    accepted = 0
    for guess in ["slate", "brace", "grace", "drake"]:
        if game.submit_guess(guess):
            accepted += 1
    assert accepted == 3
    assert game.is_over


def test_hidden_word_is_lowercased():
    game = WordleGame("CRANE")
    assert game.wordle == "crane"
    game.submit_guess("crane")
    assert game.won


def test_unplayed_rows_cannot_be_scored():
    game = WordleGame("crane")
    with pytest.raises(IndexError):
        game.score_row(0)
    with pytest.raises(IndexError):
        game.last_guess
    with pytest.raises(IndexError):
        game.row(6)


@pytest.mark.parametrize("wordle, guesses", [("", 6), ("cr4ne", 6), ("crane", 0)])
def test_constructor_validation(wordle, guesses):
    with pytest.raises(ValueError):
        WordleGame(wordle, guesses)


def test_random_standard_game():
    vocab = WordVocab(["crane", "slate", "trace"])
    game = WordleGame.random_standard_game(WordSampler(vocab, seed=3))
    assert game.wordle in vocab
    assert game.num_guesses == STANDARD_GUESSES
