"""
Turn state and guess handling for the cribbage quiz.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .deck import Deck
from .guess import Correct, GuessResult, Incorrect, evaluate_numeric
from .hand_scorer import Hand
from .history import TurnHistory
from .meld_diff import diff_melds
from .notation import tokenize

DIGITS = re.compile(r"^[0-9]+$")


@dataclass
class TurnState:
    """Everything that changes from turn to turn."""
    current_hand: Optional[Hand] = None
    streak: int = 0
    turn: int = 0


class GuessingGame:
    """
    Deals hands and checks guesses about their scores.

    A guess is either digits ("7", or "2 2 3" meaning 7) or meld notation
    ("fffn" for three fifteens and his nobs). handle_guess returns None when
    the input is neither, and the caller should simply ask again.
    """

    def __init__(self, deck: Deck = None, history: TurnHistory = None):
        self.logger = logging.getLogger(__name__)
        self.deck = (deck or Deck.standard_52()).shuffle()
        self.history = history or TurnHistory()
        self.state = TurnState()

    @property
    def streak(self) -> int:
        return self.state.streak

    @property
    def current_hand(self) -> Optional[Hand]:
        return self.state.current_hand

    def prep_next_turn(self) -> None:
        """Deal a fresh hand, then return the cards and reshuffle."""
        cards = self.deck.pick(5)
        self.state.current_hand = Hand(cards[0], cards[1:])
        self.state.turn += 1

        self.deck.replace(cards)
        self.deck.shuffle()
        self.logger.debug("Turn %d dealt %s", self.state.turn, self.state.current_hand)

    def handle_guess(self, guess: str) -> Optional[GuessResult]:
        if self.state.current_hand is None:
            raise RuntimeError("No hand dealt yet; call prep_next_turn() first")

        words = guess.split()
        if not words:
            return None

        want = self.state.current_hand.score_board.score

        if all(DIGITS.match(w) for w in words):
            # "7" or "2 2 3"
            self.logger.debug("Numeric guess %r", words)
            result = evaluate_numeric(words, want)
        else:
            # "fffn" or "f f f n"
            tokens = tokenize("".join(words))
            if tokens is None:
                self.logger.debug("Could not parse guess %r", guess)
                return None
            self.logger.debug("Notation guess %r", tokens)
            result = diff_melds(tokens, self.state.current_hand.score_board.hits).verdict(want)

        return self._resolve(guess, result)

    def _resolve(self, guess: str, result: GuessResult) -> GuessResult:
        if isinstance(result, Correct):
            self.state.streak += 1
            self._record(guess, "correct")
        elif isinstance(result, Incorrect):
            self.state.streak = 0
            self._record(guess, "incorrect", result.brief, result.details)
        else:
            raise TypeError(f"Expected a GuessResult but got {result!r}")

        self.logger.debug("Guess %r resolved to %r, streak %d", guess, result, self.state.streak)
        return result

    def _record(self, guess: str, outcome: str, brief: str = "", details: str = ""):
        self.history.add_record(
            turn=self.state.turn,
            hand=str(self.state.current_hand),
            guess=guess.strip(),
            outcome=outcome,
            brief=brief,
            details=details,
            streak=self.state.streak
        )
