import pytest

from conftest import FIFTEENS_AND_NOBS, PAIR_ROYAL_ONLY, fixed_game
from cribbage_quiz.engine.deck import Deck
from cribbage_quiz.engine.game import GuessingGame
from cribbage_quiz.engine.guess import Correct, Incorrect
from cribbage_quiz.engine.meld_diff import WRONG_MELDS


@pytest.mark.parametrize("guess", ["5", "2 2 1", "0 5", "  3   2 ", "05"])
def test_numeric_guesses_summing_to_the_score_are_correct(nobs_game, guess):
    assert nobs_game.handle_guess(guess) == Correct()


def test_numeric_guess_off_by(nobs_game):
    assert nobs_game.handle_guess("4 4") == Incorrect("You were off by 3")


@pytest.mark.parametrize("guess", ["ffn", "fnf", "f f n", "n ff"])
def test_notation_naming_exact_melds_is_correct(nobs_game, guess):
    assert nobs_game.handle_guess(guess) == Correct()


def test_partial_credit(nobs_game):
    result = nobs_game.handle_guess("p2n")
    assert isinstance(result, Incorrect)
    assert result.brief == "You were off by 2"
    assert "Fifteen: You missed 2" in result.details
    assert "Pair: You overcounted 1" in result.details
    assert result.details.index("Fifteen") < result.details.index("Pair")


def test_same_total_wrong_melds(royal_game):
    assert royal_game.handle_guess("p3") == Correct()

    result = royal_game.handle_guess("ffp")
    assert isinstance(result, Incorrect)
    assert result.brief == WRONG_MELDS


@pytest.mark.parametrize("guess", ["", "   ", "xyz", "p5", "r2", "2f", "hello"])
def test_unparseable_guesses_are_not_understood(nobs_game, guess):
    assert nobs_game.handle_guess(guess) is None


def test_not_understood_keeps_the_streak(nobs_game):
    nobs_game.handle_guess("5")
    assert nobs_game.handle_guess("what?") is None
    assert nobs_game.streak == 1
    assert len(nobs_game.history.records) == 1


def test_streak_counts_correct_guesses_and_resets():
    game = fixed_game(FIFTEENS_AND_NOBS, PAIR_ROYAL_ONLY)
    assert game.streak == 0
    for answer in ["5", "6", "ffn"]:
        game.prep_next_turn()
        assert game.handle_guess(answer) == Correct()
    assert game.streak == 3

    game.prep_next_turn()
    assert isinstance(game.handle_guess("1"), Incorrect)
    assert game.streak == 0


def test_prep_next_turn_deals_a_new_hand_and_keeps_the_deck():
    game = fixed_game(FIFTEENS_AND_NOBS, PAIR_ROYAL_ONLY)
    game.prep_next_turn()
    first = game.current_hand
    game.prep_next_turn()
    assert game.current_hand is not first
    assert game.current_hand.score_board.score == 6
    assert game.deck.size() == 10


def test_random_deal_uses_a_full_deck():
    game = GuessingGame(deck=Deck.standard_52())
    game.prep_next_turn()
    assert len(game.current_hand.cards) == 5
    assert game.deck.size() == 52


def test_guess_before_deal_is_an_error():
    game = fixed_game(FIFTEENS_AND_NOBS)
    with pytest.raises(RuntimeError):
        game.handle_guess("5")


def test_history_records_resolved_guesses(nobs_game):
    nobs_game.handle_guess("5")
    nobs_game.prep_next_turn()
    nobs_game.handle_guess("ffp p")

    first, second = nobs_game.history.records
    assert (first.turn, first.outcome, first.streak) == (1, "correct", 1)
    assert (second.turn, second.outcome, second.streak) == (2, "incorrect", 0)
    assert second.guess == "ffp p"
    assert second.brief == "You were off by 2"
    assert nobs_game.history.best_streak == 1
