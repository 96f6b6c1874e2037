"""
Turn history tracking for a quiz session.
Captures each resolved guess so a session can be reviewed or saved.
"""

from dataclasses import dataclass, asdict
import json
from pathlib import Path


@dataclass
class TurnRecord:
    """A single resolved guess."""
    turn: int
    hand: str
    guess: str
    outcome: str  # "correct" or "incorrect"
    brief: str = ""
    details: str = ""
    streak: int = 0  # streak after this guess


class TurnHistory:
    """Captures the guesses of a session."""

    def __init__(self):
        self.records: list[TurnRecord] = []

    def add_record(self, turn: int, hand: str, guess: str, outcome: str,
                   brief: str = "", details: str = "", streak: int = 0):
        """Add a resolved guess to the history."""
        self.records.append(TurnRecord(
            turn=turn,
            hand=hand,
            guess=guess,
            outcome=outcome,
            brief=brief,
            details=details,
            streak=streak
        ))

    @property
    def best_streak(self) -> int:
        return max((r.streak for r in self.records), default=0)

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "records": [asdict(r) for r in self.records],
            "summary": self._generate_summary()
        }

    def _generate_summary(self) -> dict:
        correct = sum(1 for r in self.records if r.outcome == "correct")
        return {
            "turns": len(self.records),
            "correct": correct,
            "incorrect": len(self.records) - correct,
            "best_streak": self.best_streak,
        }

    def save(self, filepath: str):
        """Save the history to JSON."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'TurnHistory':
        """Load a history from JSON."""
        with open(filepath) as f:
            data = json.load(f)

        history = cls()
        for record_data in data["records"]:
            history.records.append(TurnRecord(**record_data))
        return history
