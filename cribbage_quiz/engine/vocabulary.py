"""
Meld codes accepted in notation guesses.
"""

from dataclasses import dataclass

from .hand_scorer import (
    FIFTEEN, PAIR, PAIR_ROYAL, DOUBLE_PAIR_ROYAL, RUN_OF_THREE, RUN_OF_FOUR,
    RUN_OF_FIVE, HAND_FLUSH, FIVE_CARD_FLUSH, HIS_NOBS,
)


@dataclass(frozen=True)
class MeldVocabularyEntry:
    code: str
    type_name: str
    points: int


MELD_VOCABULARY = {
    entry.code: entry for entry in (
        MeldVocabularyEntry("n", HIS_NOBS, 1),
        MeldVocabularyEntry("f", FIFTEEN, 2),
        MeldVocabularyEntry("s", HAND_FLUSH, 4),
        MeldVocabularyEntry("S", FIVE_CARD_FLUSH, 5),
        MeldVocabularyEntry("r3", RUN_OF_THREE, 3),
        MeldVocabularyEntry("r4", RUN_OF_FOUR, 4),
        MeldVocabularyEntry("r5", RUN_OF_FIVE, 5),
        # "p" and "p2" both mean a plain pair
        MeldVocabularyEntry("p", PAIR, 2),
        MeldVocabularyEntry("p2", PAIR, 2),
        MeldVocabularyEntry("p3", PAIR_ROYAL, 6),
        MeldVocabularyEntry("p4", DOUBLE_PAIR_ROYAL, 12),
    )
}
