"""
cell.py - A single slot of the Connect Four board
"""

from connect4.utils import Token, token_value


class Cell:
    """
    One square of the board.

    Holds 0 when empty, otherwise the token value of the player occupying it.
    """

    __slots__ = ("_value",)

    def __init__(self):
        self._value = Token.EMPTY.value

    def set_value(self, token) -> None:
        """Store a token in this cell. The value is trusted, not range-checked."""
        self._value = token_value(token)

    def get_value(self) -> int:
        return self._value

    def is_empty(self) -> bool:
        return self._value == Token.EMPTY.value

    def __repr__(self):
        return f"Cell({self._value})"
