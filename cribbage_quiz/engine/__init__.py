"""
Cribbage quiz engine components.
"""

from .deck import Card, Deck, Suit, RANKS, PIP_VALUES, RANK_ORDER
from .hand_scorer import Hand, HandScorer, ScoreBoard, ScoringHit, score_hand
from .vocabulary import MeldVocabularyEntry, MELD_VOCABULARY
from .notation import tokenize
from .meld_diff import MeldDiff, diff_melds
from .guess import Correct, Incorrect, GuessResult, evaluate_numeric
from .history import TurnHistory, TurnRecord
from .game import GuessingGame, TurnState
from .errors import NotationInvariantError
