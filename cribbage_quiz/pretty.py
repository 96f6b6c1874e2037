"""
Text rendering of hands and score breakdowns for the front ends.
"""

from .engine.hand_scorer import Hand, ScoreBoard


class PrettyPrinter:

    @staticmethod
    def hand_string(hand: Hand) -> str:
        cards = "  ".join(f"{str(c):>3}" for c in hand.rest)
        return f"Starter: {str(hand.starter):>3}\n   Hand: {cards}"

    @staticmethod
    def score_string(score_board: ScoreBoard) -> str:
        lines = []
        for hit in score_board.hits:
            cards = " ".join(str(c) for c in hit.cards)
            lines.append(f"  {hit.type:<18} {hit.score:>3}  {cards}")
        if not lines:
            lines.append("  Nothing scores. Nineteen!")
        lines.append(f"  {'Total':<18} {score_board.score:>3}")
        return "\n".join(lines)
