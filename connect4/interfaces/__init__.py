"""
connect4.interfaces - User interfaces for Connect Four

This package contains the interfaces that render the game and forward
column choices to the game controller: the terminal CLI, the Flask browser
interface, and a Gymnasium environment for scripted play.
"""

# Don't import anything here so the CLI does not pull in Flask or Gymnasium
__all__ = []
