"""
cli.py - Command-line interface for Connect Four

This module provides a hot-seat terminal game, a launcher for the browser
interface, and a small benchmark of the board operations.
"""

import argparse
import random
import sys
from typing import List, Optional

from connect4.config import Settings
from connect4.debug import debug, LEVEL_NAMES
from connect4.game.board import Board
from connect4.game.controller import GameController
from connect4.interfaces.render import round_message
from connect4.utils import COLS

QUIT = 'q'
RESTART = 'r'


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, settings: Settings = None):
        """Initialize the CLI."""
        self.settings = settings
        self.game: Optional[GameController] = None
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug-level', choices=sorted(LEVEL_NAMES),
                            help='Logging verbosity')
        parser.add_argument('--log-file', help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        players = argparse.ArgumentParser(add_help=False)
        players.add_argument('--player-one', help='Name of the first player')
        players.add_argument('--player-two', help='Name of the second player')
        players.add_argument('--loser-starts', action='store_true',
                             help='After a win, the other player opens the next game')
        players.add_argument('--debug', action='store_true', help='Enable debug logging')

        subparsers.add_parser('play', parents=[players], help='Play a hot-seat game in the terminal')

        serve_parser = subparsers.add_parser('serve', parents=[players],
                                             help='Serve the game to a web browser')
        serve_parser.add_argument('--host', help='Interface to listen on')
        serve_parser.add_argument('--port', type=int, help='Port to listen on')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark board operations')
        benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--debug', action='store_true', help='Enable debug logging')

        return parser

    def parse_args(self, argv: List[str] = None) -> None:
        """Parse command-line arguments and merge them into the settings."""
        self.args = self.build_parser().parse_args(argv)

        settings = self.settings or Settings.from_env()
        debug_level = 'debug' if getattr(self.args, 'debug', False) else self.args.debug_level
        self.settings = settings.override(
            player_one_name=getattr(self.args, 'player_one', None),
            player_two_name=getattr(self.args, 'player_two', None),
            winner_starts_next=False if getattr(self.args, 'loser_starts', False) else None,
            debug_level=debug_level,
            log_file=self.args.log_file,
            host=getattr(self.args, 'host', None),
            port=getattr(self.args, 'port', None),
        )
        self.settings.apply_logging()

    def create_game(self) -> GameController:
        return GameController(
            player_one_name=self.settings.player_one_name,
            player_two_name=self.settings.player_two_name,
            winner_starts_next=self.settings.winner_starts_next,
        )

    def run(self, argv: List[str] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'serve':
            self.serve()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play Connect Four interactively until a player quits."""
        self.game = self.create_game()
        print("Starting a new Connect Four game!")
        print(f"Enter column number (0-{COLS - 1}) to drop a token.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        print(self.game.render())

        while True:
            player = self.game.get_active_player()
            command = self.get_human_move(player.name)

            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return
            if command == RESTART:
                self.game.reset()
                print("Game restarted.")
                print(self.game.render())
                continue

            result = self.game.play_round(command)
            print(round_message(result))
            if result.ok:
                print(self.game.render())

    def get_human_move(self, name: str):
        """
        Read one command from the active player.

        Returns:
            Column index, QUIT or RESTART, or None if the input was not understood
        """
        try:
            user_input = input(f"{name}'s move (columns 0-{COLS - 1}, {QUIT}/{RESTART}): ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or special command.")
            return None

    def serve(self) -> None:
        """Start the browser interface."""
        from connect4.interfaces.web import create_app

        app = create_app(self.create_game())
        debug.info(f"Serving Connect Four on http://{self.settings.host}:{self.settings.port}", "cli")
        app.run(host=self.settings.host, port=self.settings.port)

    def benchmark(self) -> None:
        """Benchmark drops and win checks on a fresh board."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} iterations...")

        board = Board()
        drops = 0
        debug.start_timer("drops")
        for _ in range(iterations):
            valid_moves = board.get_valid_moves()
            if not valid_moves:
                board.clear_board()
                valid_moves = board.get_valid_moves()
            col = random.choice(valid_moves)
            token = drops % 2 + 1
            row = board.drop_token(col, token)
            drops += 1
            if board.is_winning_move(row, col, token):
                board.clear_board()
        drops_time = debug.end_timer("drops", "cli")
        print(f"Made {drops} drops with win checks: {drops_time:.6f} seconds total, "
              f"{drops_time / drops * 1000:.6f} ms per drop")

        board.clear_board()
        debug.start_timer("rendering")
        for _ in range(iterations):
            board.render()
        rendering_time = debug.end_timer("rendering", "cli")
        print(f"Rendering board {iterations} times: {rendering_time:.6f} seconds total, "
              f"{rendering_time / iterations * 1000:.6f} ms per render")


def main(argv: List[str] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
