"""
gym_env.py - Gymnasium environment around the Connect Four game controller

Each step plays one round for whichever player is active, so a script or
test harness can drive both sides of a hot-seat game through the standard
Gymnasium interface.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Any, Dict, Optional, Tuple, Union

from connect4.debug import debug
from connect4.game.controller import GameController, RoundResult
from connect4.interfaces.render import BOARD_COLOR, TOKEN_COLORS, serialize_player
from connect4.utils import ROWS, COLS

CELL_PIXELS = 50


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    A winning drop terminates the episode. Because the controller clears the
    board as soon as a game is won, the observation returned with the win is
    the empty board and the winning grid is reported in info['final_board'].
    A rejected move (bad column or full column) truncates the episode.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, controller: GameController = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            controller: Game to drive; a default one is created when omitted
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)
        # Observation space: 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.controller = controller if controller is not None else GameController()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board with player one to move.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.controller.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play one round in the given column for the active player.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        before = self.controller.get_board()
        result = self.controller.play_round(action)
        info = self._get_info(result)

        if not result.ok:
            debug.warning(f"Invalid action: {action}", "env")
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.won:
            final_board = np.array(before)
            final_board[result.row, result.column] = result.player.token
            info['final_board'] = final_board.astype(np.int8)
            debug.info(f"Game over: {result.player.name} wins", "env")
            reward = self.reward_win
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            Rendered frame depending on render_mode
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.controller.render()

        if self.render_mode == "human":
            print(self.controller.render())
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb()

        return None

    def _render_rgb(self) -> np.ndarray:
        grid = self.controller.get_board()
        rgb_array = np.zeros((ROWS * CELL_PIXELS, COLS * CELL_PIXELS, 3), dtype=np.uint8)
        rgb_array[:, :] = BOARD_COLOR

        # Disc mask shared by every cell
        radius = CELL_PIXELS * 2 // 5
        offsets = np.arange(CELL_PIXELS) - CELL_PIXELS // 2
        disc = offsets[:, None] ** 2 + offsets[None, :] ** 2 <= radius ** 2

        for row in range(ROWS):
            for col in range(COLS):
                tile = rgb_array[row * CELL_PIXELS:(row + 1) * CELL_PIXELS,
                                 col * CELL_PIXELS:(col + 1) * CELL_PIXELS]
                tile[disc] = TOKEN_COLORS[int(grid[row, col])]

        return rgb_array

    def _get_observation(self) -> np.ndarray:
        return self.controller.get_board().astype(np.int8)

    def _get_info(self, result: RoundResult = None) -> Dict[str, Any]:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        info = {
            'valid_moves': self.controller.board.get_valid_moves(),
            'active_player': serialize_player(self.controller.get_active_player()),
        }
        if result is not None:
            info['row'] = result.row
            info['won'] = result.won
            info['error'] = result.error.code if result.error is not None else None
        return info
