"""
exceptions.py - Errors raised by the Connect Four game engine

Both errors are recoverable: the board is left untouched and the game keeps
accepting moves.
"""


class Connect4Error(Exception):
    """Base class for rejected moves."""

    code = "error"

    def __init__(self, column, message: str):
        super().__init__(message)
        self.column = column


class InvalidColumnError(Connect4Error, ValueError):
    """The column index is not an integer in [0, COLS)."""

    code = "invalid_column"

    def __init__(self, column, cols: int):
        super().__init__(column, f"Column {column!r} is out of range (0-{cols - 1})")


class ColumnFullError(Connect4Error):
    """The column has no empty cell left."""

    code = "column_full"

    def __init__(self, column: int):
        super().__init__(column, f"Column {column} is full")
