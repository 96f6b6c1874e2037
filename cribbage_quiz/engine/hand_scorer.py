"""
Hand scoring for the cribbage quiz.
Finds every scoring meld in a four-card hand plus the starter.
"""

from collections import Counter
from dataclasses import dataclass, field
from itertools import combinations, product

from .deck import Card

FIFTEEN = "Fifteen"
PAIR = "Pair"
PAIR_ROYAL = "Pair Royal"
DOUBLE_PAIR_ROYAL = "Double Pair Royal"
RUN_OF_THREE = "Run of Three"
RUN_OF_FOUR = "Run of Four"
RUN_OF_FIVE = "Run of Five"
HAND_FLUSH = "Hand Flush"
FIVE_CARD_FLUSH = "Five Card Flush"
HIS_NOBS = "His Nobs"

# Melds keyed by how many cards of one rank the hand holds
SETS_BY_COUNT = {
    2: (PAIR, 2),
    3: (PAIR_ROYAL, 6),
    4: (DOUBLE_PAIR_ROYAL, 12),
}

RUNS_BY_LENGTH = {
    3: RUN_OF_THREE,
    4: RUN_OF_FOUR,
    5: RUN_OF_FIVE,
}


@dataclass(frozen=True)
class ScoringHit:
    """A single meld found in a hand."""
    type: str
    score: int
    cards: tuple[Card, ...] = ()


@dataclass
class ScoreBoard:
    """Every meld in a hand and their total."""
    hits: list[ScoringHit] = field(default_factory=list)

    @property
    def score(self) -> int:
        return sum(hit.score for hit in self.hits)


class Hand:
    """A cribbage hand: the starter plus the four cards held."""

    def __init__(self, starter: Card, rest: list[Card]):
        if len(rest) != 4:
            raise ValueError(f"A hand holds 4 cards besides the starter, got {len(rest)}")
        self.starter = starter
        self.rest: list[Card] = list(rest)
        self._score_board = None

    @property
    def cards(self) -> list[Card]:
        return [self.starter] + self.rest

    @property
    def score_board(self) -> ScoreBoard:
        if self._score_board is None:
            self._score_board = HandScorer().score(self)
        return self._score_board

    def __str__(self) -> str:
        return f"{self.starter} | " + ", ".join(str(c) for c in self.rest)

    def __repr__(self) -> str:
        return f"Hand({self.__str__()})"


class HandScorer:
    """Scores hands under the standard (non-crib) show rules."""

    def score(self, hand: Hand) -> ScoreBoard:
        board = ScoreBoard()
        board.hits.extend(self._fifteens(hand.cards))
        board.hits.extend(self._sets(hand.cards))
        board.hits.extend(self._runs(hand.cards))
        board.hits.extend(self._flush(hand))
        board.hits.extend(self._nobs(hand))
        return board

    def _fifteens(self, cards: list[Card]) -> list[ScoringHit]:
        hits = []
        for size in range(2, len(cards) + 1):
            for combo in combinations(cards, size):
                if sum(c.pip_value for c in combo) == 15:
                    hits.append(ScoringHit(FIFTEEN, 2, combo))
        return hits

    def _sets(self, cards: list[Card]) -> list[ScoringHit]:
        hits = []
        rank_counts = Counter(c.rank for c in cards)
        for rank, count in rank_counts.items():
            if count in SETS_BY_COUNT:
                meld, points = SETS_BY_COUNT[count]
                hits.append(ScoringHit(meld, points, tuple(c for c in cards if c.rank == rank)))
        return hits

    def _runs(self, cards: list[Card]) -> list[ScoringHit]:
        """One hit per distinct run, so a double run of three yields two hits."""
        by_order: dict[int, list[Card]] = {}
        for card in cards:
            by_order.setdefault(card.rank_order, []).append(card)

        orders = sorted(by_order)
        hits = []
        start = 0
        while start < len(orders):
            end = start + 1
            while end < len(orders) and orders[end] == orders[end - 1] + 1:
                end += 1
            block = orders[start:end]
            if len(block) >= 3:
                meld = RUNS_BY_LENGTH[len(block)]
                for combo in product(*(by_order[o] for o in block)):
                    hits.append(ScoringHit(meld, len(block), combo))
            start = end
        return hits

    def _flush(self, hand: Hand) -> list[ScoringHit]:
        suits = {c.suit for c in hand.rest}
        if len(suits) != 1:
            return []
        if hand.starter.suit in suits:
            return [ScoringHit(FIVE_CARD_FLUSH, 5, tuple(hand.cards))]
        return [ScoringHit(HAND_FLUSH, 4, tuple(hand.rest))]

    def _nobs(self, hand: Hand) -> list[ScoringHit]:
        for card in hand.rest:
            if card.rank == "J" and card.suit == hand.starter.suit:
                return [ScoringHit(HIS_NOBS, 1, (card,))]
        return []


def score_hand(starter: Card, rest: list[Card]) -> ScoreBoard:
    """Convenience function to score a hand."""
    return Hand(starter, rest).score_board
