"""
Compare the melds named in a notation guess against the melds actually in a hand.
"""

from collections import Counter
from dataclasses import dataclass

from .errors import NotationInvariantError
from .guess import Correct, GuessResult, Incorrect, off_by
from .hand_scorer import ScoringHit
from .vocabulary import MELD_VOCABULARY

WRONG_MELDS = "You got the right score, but the wrong hands."


@dataclass
class MeldDiff:
    """Outcome of diffing guessed melds against a hand's hits."""
    guessed_score: int
    report: str
    mismatched: bool

    def verdict(self, want: int) -> GuessResult:
        """Turn the diff into a result against the hand's true score."""
        if not self.mismatched and self.guessed_score == want:
            return Correct()
        if self.guessed_score == want:
            return Incorrect(WRONG_MELDS, self.report)
        return Incorrect(off_by(self.guessed_score, want), self.report)


def diff_melds(tokens: list[str], actual_hits: list[ScoringHit]) -> MeldDiff:
    """
    Count guessed melds up and actual melds down, per meld type.

    A positive balance means the guess overcounted that type, a negative one
    means it missed some. Report lines are in sorted type order.
    """
    guessed_score = 0
    balance = Counter()

    for token in tokens:
        entry = MELD_VOCABULARY.get(token)
        if entry is None:
            raise NotationInvariantError(token)
        guessed_score += entry.points
        balance[entry.type_name] += 1

    for hit in actual_hits:
        balance[hit.type] -= 1

    lines = []
    for type_name in sorted(balance):
        count = balance[type_name]
        if count == 0:
            continue
        verb = "overcounted" if count > 0 else "missed"
        lines.append(f"{type_name}: You {verb} {abs(count)}\n")

    return MeldDiff(
        guessed_score=guessed_score,
        report="".join(lines),
        mismatched=bool(lines),
    )
