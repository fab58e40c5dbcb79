"""Shared fixtures for the Connect Four test suite."""

import pytest

from connect4.debug import debug, DebugLevel
from connect4.game.board import Board
from connect4.game.controller import GameController


@pytest.fixture(autouse=True)
def quiet_debug():
    """Restore the shared debug manager after every test."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def game():
    return GameController()


@pytest.fixture
def fill():
    """Drop (column, token) pairs onto a board in order and return the landing rows."""
    def _fill(board, moves):
        return [board.drop_token(column, token) for column, token in moves]
    return _fill
