"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which owns the grid of cells and
provides the operations the game controller builds on: dropping a token into
a column, checking whether a placement completes a line of four, and
clearing the grid for the next game.
"""

import numpy as np
from typing import List, Tuple

from connect4.debug import debug
from connect4.exceptions import ColumnFullError, InvalidColumnError
from connect4.game.cell import Cell
from connect4.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, Token,
                            is_index, is_valid_position, iter_runs, line_through,
                            render_board_ascii, token_value)


class Board:
    """
    Represents a Connect Four game board.

    The grid is ROWS x COLS cells addressed as (row, column), with row 0 at
    the top and column 0 on the left. The cells are created once and only
    their values change afterwards.
    """

    rows = ROWS
    columns = COLS

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.debug("Initializing new Board", "board")
        self._cells = [[Cell() for _ in range(COLS)] for _ in range(ROWS)]

    def get_board(self) -> np.ndarray:
        """
        Get a snapshot of the cell values.

        Returns:
            Read-only ROWS x COLS integer array (0 empty, 1 and 2 player tokens)
        """
        grid = np.array([[cell.get_value() for cell in row] for row in self._cells], dtype=int)
        grid.flags.writeable = False
        return grid

    def get_cell(self, row: int, column: int) -> Cell:
        if not is_valid_position(row, column):
            raise IndexError(f"Position ({row}, {column}) is off the board")
        return self._cells[row][column]

    def is_valid_column(self, column) -> bool:
        """Check that column is an integer index inside the board."""
        return is_index(column) and 0 <= column < COLS

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return not self._cells[0][column].is_empty()

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that can still take a token.

        Returns:
            List of column indices
        """
        return [col for col in range(COLS) if self._cells[0][col].is_empty()]

    def _check_column(self, column) -> None:
        if not self.is_valid_column(column):
            debug.debug(f"Rejected column {column!r}: out of range", "board")
            raise InvalidColumnError(column, COLS)

    def drop_token(self, column: int, token) -> int:
        """
        Drop a token into a column and let it fall to the lowest empty cell.

        Args:
            column: The column to drop into (0-indexed)
            token: Token or token value to place

        Returns:
            The landing row

        Raises:
            InvalidColumnError: column is not an index of the board
            ColumnFullError: column has no empty cell; the board is unchanged
        """
        self._check_column(column)
        column = int(column)

        # Find the lowest empty row in the column
        for row in range(ROWS - 1, -1, -1):
            cell = self._cells[row][column]
            if cell.is_empty():
                cell.set_value(token)
                debug.debug(f"Placed token {token_value(token)} at ({row}, {column})", "board")
                return row

        debug.debug(f"Column {column} is full", "board")
        raise ColumnFullError(column)

    def is_winning_move(self, row: int, column: int, token) -> bool:
        """
        Check whether the lines through a placement hold four of token in a row.

        The full row, the full column and both diagonals through (row, column)
        are scanned with a run counter that resets on every mismatch. The scan
        stops as soon as a run reaches CONNECT_N, so longer runs also win.

        Args:
            row: Row of the most recently placed token
            column: Column of the most recently placed token
            token: Token that was placed

        Returns:
            True if the move completes a line, False otherwise
        """
        return bool(self.get_winning_line(row, column, token))

    def get_winning_line(self, row: int, column: int, token) -> List[Tuple[int, int]]:
        """
        Get the positions of the winning run through a placement.

        Returns:
            List of (row, col) positions forming the whole run, or empty list if no win
        """
        self._check_column(column)
        if not is_valid_position(row, column):
            raise IndexError(f"Row {row!r} is off the board")

        target = token_value(token)
        if target == Token.EMPTY.value:
            return []

        debug.start_timer("win_check")
        try:
            for direction in DIRECTION_VECTORS:
                positions = line_through(row, column, direction)
                values = [self._cells[r][c].get_value() for r, c in positions]
                debug.trace(f"Scanning {direction.name} through ({row}, {column}): {values}", "board")

                for index, count in iter_runs(values, target):
                    if count < CONNECT_N:
                        continue
                    start = index - count + 1
                    end = index + 1
                    while end < len(values) and values[end] == target:
                        end += 1
                    debug.debug(f"Winning {direction.name} line for token {target}", "board")
                    return positions[start:end]
            return []
        finally:
            debug.end_timer("win_check", "board")

    def clear_board(self) -> None:
        """Reset every cell to empty in place."""
        debug.debug("Clearing board", "board")
        for row in self._cells:
            for cell in row:
                cell.set_value(Token.EMPTY)

    def is_empty(self) -> bool:
        return all(cell.is_empty() for row in self._cells for cell in row)

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.get_board())

    def __str__(self) -> str:
        return self.render()
