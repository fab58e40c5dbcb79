"""
connect4 - Two-player Connect Four game

This package provides the board and game controller for Connect Four,
together with a terminal interface, a browser interface and a Gymnasium
environment built on the same rendering contract.
"""

# Version number
__version__ = '0.1.0'
