"""
Errors raised by the quiz engine.
"""


class NotationInvariantError(RuntimeError):
    """A token passed the notation grammar but has no meld vocabulary entry.

    This means the grammar and the vocabulary have drifted apart. It is a bug
    in the engine, never a user mistake, so nothing in the package catches it.
    """

    def __init__(self, token: str):
        super().__init__(f"Notation token {token!r} has no meld vocabulary entry")
        self.token = token
