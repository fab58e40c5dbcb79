"""
render.py - Shared rendering contract for the Connect Four interfaces

Every interface paints the board from the same mapping of token values:
0 is an empty slot, 1 is player one and 2 is player two. The serializers
below turn controller state and round results into plain dictionaries the
web interface sends as JSON.
"""

from typing import Any, Dict, Optional

from connect4.game.controller import GameController, Player, RoundResult
from connect4.utils import ROWS, COLS, Token

TOKEN_STYLES = {
    Token.EMPTY.value: "empty",
    Token.ONE.value: "player-one",
    Token.TWO.value: "player-two",
}

# RGB colours for image rendering
TOKEN_COLORS = {
    Token.EMPTY.value: (0, 0, 0),        # Black for empty
    Token.ONE.value: (255, 0, 0),        # Red for player one
    Token.TWO.value: (255, 255, 0),      # Yellow for player two
}

BOARD_COLOR = (0, 0, 128)


def serialize_player(player: Optional[Player]) -> Optional[Dict[str, Any]]:
    if player is None:
        return None
    return {'name': player.name, 'token': player.token}


def serialize_state(controller: GameController) -> Dict[str, Any]:
    """Convert controller state to a JSON-serializable dictionary."""
    return {
        'board': controller.get_board().tolist(),
        'rows': ROWS,
        'cols': COLS,
        'active_player': serialize_player(controller.get_active_player()),
        'players': [serialize_player(p) for p in controller.get_players()],
        'valid_moves': controller.board.get_valid_moves(),
        'styles': {str(value): style for value, style in TOKEN_STYLES.items()},
    }


def round_message(result: RoundResult) -> str:
    """Human-readable summary of a round, shared by the CLI and the web page."""
    if result.error is not None:
        return f"{result.error}. {result.player.name}, choose another column."
    if result.won:
        return f"{result.player.name} wins! The board has been cleared for a new game."
    return f"{result.player.name} dropped a token into column {result.column}."


def serialize_round(result: RoundResult) -> Dict[str, Any]:
    """Convert a RoundResult to a JSON-serializable dictionary."""
    return {
        'column': result.column,
        'row': result.row,
        'won': result.won,
        'winner': serialize_player(result.player) if result.won else None,
        'error': result.error.code if result.error is not None else None,
        'message': round_message(result),
    }
