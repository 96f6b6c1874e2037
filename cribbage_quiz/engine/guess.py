"""
Guess results and numeric guess evaluation.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Correct:
    """The guess matched the hand."""


@dataclass(frozen=True)
class Incorrect:
    """The guess was well formed but wrong."""
    brief: str
    details: str = ""


GuessResult = Union[Correct, Incorrect]


def off_by(guessed: int, want: int) -> str:
    return f"You were off by {abs(guessed - want)}"


def evaluate_numeric(words: list[str], want: int) -> GuessResult:
    """Sum digit words ("2 2 1" means 5) and compare against the hand's score.

    Words must already be known to be digit strings. An empty list sums to 0.
    """
    guessed = sum(int(w) for w in words)
    if guessed == want:
        return Correct()
    return Incorrect(off_by(guessed, want))
