"""
connect4.game - Core game mechanics for Connect Four

This package contains the cell and board representation and the
controller that sequences rounds between two players.
"""

from connect4.game.cell import Cell
from connect4.game.board import Board
from connect4.game.controller import GameController, Player, RoundResult

__all__ = ['Cell', 'Board', 'GameController', 'Player', 'RoundResult']
