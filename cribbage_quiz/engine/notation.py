"""
Tokenizer for compact meld notation such as "p3n" or "fff r3".

Grammar:
    token := "f" | "n" | "s" | "S" | "p" ["2".."4"] | "r" "3".."5"

The whole input must be consumed by tokens. Anything left over rejects the
guess outright instead of returning a partial parse.
"""

from typing import Optional

SINGLE_CODES = frozenset("fnsS")
PAIR_SIZES = frozenset("234")
RUN_LENGTHS = frozenset("345")


def tokenize(combined: str) -> Optional[list[str]]:
    """Split notation into meld codes, or return None if any character is left over.

    Whitespace is not skipped here; callers join the guess words first.
    """
    tokens = []
    i = 0
    while i < len(combined):
        char = combined[i]
        following = combined[i + 1] if i + 1 < len(combined) else ""

        if char in SINGLE_CODES:
            tokens.append(char)
            i += 1
        elif char == "p":
            if following in PAIR_SIZES:
                tokens.append(char + following)
                i += 2
            else:
                tokens.append(char)
                i += 1
        elif char == "r" and following in RUN_LENGTHS:
            tokens.append(char + following)
            i += 2
        else:
            return None

    return tokens
