import random
import sys
from pathlib import Path

import pytest

# Make the project root importable without installing
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cribbage_quiz.engine.deck import Card, Deck, Suit
from cribbage_quiz.engine.game import GuessingGame
from cribbage_quiz.engine.hand_scorer import Hand

SUIT_LETTERS = {"H": Suit.HEARTS, "D": Suit.DIAMONDS, "C": Suit.CLUBS, "S": Suit.SPADES}


class NoShuffle(random.Random):
    """Leaves the deck in the order it was built."""

    def shuffle(self, x):
        pass


def card(text: str) -> Card:
    """Build a card from text like "10H" or "JS"."""
    return Card(rank=text[:-1], suit=SUIT_LETTERS[text[-1]])


def cards(text: str) -> list[Card]:
    return [card(t) for t in text.split()]


def hand(text: str) -> Hand:
    """Build a hand from text; the first card is the starter."""
    parsed = cards(text)
    return Hand(parsed[0], parsed[1:])


def fixed_game(*hands: str) -> GuessingGame:
    """A game that deals the given hands in order, then starts over."""
    order = []
    for text in hands:
        order.extend(cards(text))
    return GuessingGame(deck=Deck(cards=order, rng=NoShuffle()))


# Two fifteens and his nobs, 5 points
FIFTEENS_AND_NOBS = "5S JS QH 2D 4C"
# Three sevens, 6 points, nothing else
PAIR_ROYAL_ONLY = "7S 7H 7D KC 2H"
# The 29 hand
PERFECT = "5C 5H 5D 5S JC"


@pytest.fixture()
def nobs_game():
    game = fixed_game(FIFTEENS_AND_NOBS, PAIR_ROYAL_ONLY)
    game.prep_next_turn()
    return game


@pytest.fixture()
def royal_game():
    game = fixed_game(PAIR_ROYAL_ONLY, FIFTEENS_AND_NOBS)
    game.prep_next_turn()
    return game
