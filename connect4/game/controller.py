"""
controller.py - Turn and round management for Connect Four

The GameController owns the board and the two players. Each call to
play_round drops the active player's token, checks for a win, and then
either clears the board for the next game or passes the turn on. There is
no terminal state: after a win play simply continues on a cleared board.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.exceptions import ColumnFullError, Connect4Error
from connect4.game.board import Board
from connect4.utils import Token


@dataclass(frozen=True)
class Player:
    """A participant and the token value they drop."""
    name: str
    token: int


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of one call to GameController.play_round.

    Attributes:
        player: The player whose turn it was
        column: The requested column
        row: Landing row, or None when the move was rejected
        won: Whether the drop completed a line of four
        error: The error that rejected the move, if any
    """
    player: Player
    column: object
    row: Optional[int] = None
    won: bool = False
    error: Optional[Connect4Error] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def column_full(self) -> bool:
        return isinstance(self.error, ColumnFullError)


class GameController:
    """
    Runs rounds of Connect Four between two players on one board.

    Args:
        player_one_name: Name shown for the first player
        player_two_name: Name shown for the second player
        winner_starts_next: If True the winner opens the next game, otherwise
            the turn passes to the other player as after any other round
        board: Board to play on; a new one is created when omitted
    """

    def __init__(self, player_one_name: str = "Player One",
                 player_two_name: str = "Player Two",
                 winner_starts_next: bool = True,
                 board: Board = None):
        debug.debug("Initializing GameController", "game")
        self.board = board if board is not None else Board()
        self.players = (
            Player(player_one_name, Token.ONE.value),
            Player(player_two_name, Token.TWO.value),
        )
        self.winner_starts_next = winner_starts_next
        self._active_player = self.players[0]

    def _switch_player_turn(self) -> None:
        self._active_player = self.players[1] if self._active_player is self.players[0] else self.players[0]
        debug.debug(f"Switching to {self._active_player.name}", "game")

    def get_active_player(self) -> Player:
        return self._active_player

    def get_players(self) -> Tuple[Player, Player]:
        return self.players

    def get_board(self) -> np.ndarray:
        """Snapshot of the board for renderers (see Board.get_board)."""
        return self.board.get_board()

    def play_round(self, column) -> RoundResult:
        """
        Play one round for the active player.

        A rejected move (bad column index or full column) leaves the board
        and the turn untouched and is reported through RoundResult.error.

        Args:
            column: Column to drop the active player's token into

        Returns:
            RoundResult describing the drop
        """
        player = self._active_player
        debug.debug(f"Dropping {player.name}'s token into column {column}", "game")

        try:
            row = self.board.drop_token(column, player.token)
        except Connect4Error as e:
            debug.warning(f"{player.name}: {e}", "game")
            return RoundResult(player=player, column=column, error=e)

        if self.board.is_winning_move(row, column, player.token):
            debug.info(f"{player.name} wins with a drop at ({row}, {column})", "game")
            self.board.clear_board()
            if not self.winner_starts_next:
                self._switch_player_turn()
            return RoundResult(player=player, column=column, row=row, won=True)

        self._switch_player_turn()
        return RoundResult(player=player, column=column, row=row)

    def reset(self) -> None:
        """Clear the board and give the first turn back to player one."""
        debug.debug("Resetting game", "game")
        self.board.clear_board()
        self._active_player = self.players[0]

    def render(self) -> str:
        return self.board.render()
