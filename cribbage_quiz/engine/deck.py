"""
Deck management for the cribbage quiz.
Handles card creation, shuffling, and dealing hands out and back in.
"""

import random
from dataclasses import dataclass, field
from enum import Enum


class Suit(Enum):
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"


RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
PIP_VALUES = {
    "A": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
    "10": 10, "J": 10, "Q": 10, "K": 10
}
RANK_ORDER = {rank: i + 1 for i, rank in enumerate(RANKS)}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: Suit

    @property
    def pip_value(self) -> int:
        """Counting value used for fifteens."""
        return PIP_VALUES[self.rank]

    @property
    def rank_order(self) -> int:
        """Numeric order for runs (ace low)."""
        return RANK_ORDER[self.rank]

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.value}"

    def __repr__(self) -> str:
        return self.__str__()


@dataclass
class Deck:
    cards: list[Card] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def standard_52(cls, rng: random.Random = None) -> "Deck":
        """Create a standard 52-card deck."""
        cards = []
        for suit in Suit:
            for rank in RANKS:
                cards.append(Card(rank=rank, suit=suit))
        return cls(cards=cards, rng=rng or random.Random())

    def shuffle(self) -> "Deck":
        """Shuffle the deck in place and return it."""
        self.rng.shuffle(self.cards)
        return self

    def pick(self, n: int) -> list[Card]:
        """Remove and return the top n cards."""
        if n > len(self.cards):
            raise ValueError(f"Cannot pick {n} cards from a deck of {len(self.cards)}")
        picked = self.cards[:n]
        del self.cards[:n]
        return picked

    def replace(self, cards: list[Card]) -> None:
        """Put cards back at the bottom of the deck."""
        self.cards.extend(cards)

    def size(self) -> int:
        return len(self.cards)
