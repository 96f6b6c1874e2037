"""
Cribbage Score Quiz
"""

from .engine.deck import Card, Deck, Suit
from .engine.hand_scorer import Hand, ScoreBoard, ScoringHit
from .engine.guess import Correct, Incorrect, GuessResult
from .engine.game import GuessingGame
from .engine.errors import NotationInvariantError

__version__ = "0.1.0"
