"""
utils.py - Constants, enumerations and helpers shared by the Connect Four game

This module holds the fixed board dimensions, the token values stored in the
board cells, the line directions used by win detection, and the ASCII
renderer used by the terminal interface.
"""

import numbers
from enum import Enum, auto
from typing import Iterator, List, Sequence, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win


class Token(Enum):
    """Enumeration representing cell contents and player tokens."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def __str__(self):
        return TOKEN_SYMBOLS[self.value]


TOKEN_SYMBOLS = {
    Token.EMPTY.value: " ",
    Token.ONE.value: "X",
    Token.TWO.value: "O",
}


class Direction(Enum):
    """Enumeration representing the lines checked by win detection."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


def token_value(token) -> int:
    """Normalise a Token or a plain integer to the integer stored in a cell."""
    if isinstance(token, Token):
        return token.value
    return int(token)


def is_index(value) -> bool:
    """Check that value is an integer usable as a board index (bool excluded)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is an integer pair within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    if not (is_index(row) and is_index(col)):
        return False
    return 0 <= row < ROWS and 0 <= col < COLS


def line_through(row: int, col: int, direction: Direction) -> List[Tuple[int, int]]:
    """
    Get every board position on the full line through (row, col).

    The line runs edge to edge along the given direction, so a row line has
    COLS positions, a column line ROWS positions, and a diagonal between one
    and min(ROWS, COLS) positions.

    Args:
        row: Row index of a position on the line
        col: Column index of a position on the line
        direction: Which line to walk

    Returns:
        Positions ordered along the direction vector
    """
    dr, dc = DIRECTION_VECTORS[direction]

    # Walk backwards to the edge first
    r, c = row, col
    while is_valid_position(r - dr, c - dc):
        r -= dr
        c -= dc

    positions = []
    while is_valid_position(r, c):
        positions.append((r, c))
        r += dr
        c += dc
    return positions


def iter_runs(values: Sequence[int], target: int) -> Iterator[Tuple[int, int]]:
    """
    Walk a line of cell values counting the current run of target.

    The count resets to zero on any mismatch.

    Yields:
        (index, run_length) for every index holding target
    """
    count = 0
    for index, value in enumerate(values):
        if value == target:
            count += 1
            yield index, count
        else:
            count = 0


def render_board_ascii(grid) -> str:
    """
    Render a board snapshot as ASCII art.

    Args:
        grid: ROWS x COLS values (numpy array or nested lists)

    Returns:
        ASCII representation of the board
    """
    result = []
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    result.append(border)

    for row in range(ROWS):
        symbols = [TOKEN_SYMBOLS.get(int(grid[row][col]), "?") for col in range(COLS)]
        result.append("|" + " ".join(symbols) + "|")

    result.append(border)
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
