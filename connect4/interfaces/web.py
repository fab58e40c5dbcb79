"""
web.py - Browser interface for Connect Four

A small Flask application serving one hot-seat game. The page renders the
board from /api/game/state and posts the clicked column to /api/game/move,
then repaints from the state returned with the round.
"""

from flask import Flask, jsonify, render_template, request

from connect4.debug import debug
from connect4.game.controller import GameController
from connect4.interfaces.render import TOKEN_STYLES, serialize_round, serialize_state
from connect4.utils import ROWS, COLS


def create_app(controller: GameController = None) -> Flask:
    """
    Build the Flask application around a game controller.

    Args:
        controller: Game to serve; a default two-player game when omitted
    """
    app = Flask(__name__)
    game = controller if controller is not None else GameController()
    app.config['GAME'] = game

    @app.route('/')
    def index():
        """Main game page."""
        return render_template('index.html', rows=ROWS, cols=COLS, styles=TOKEN_STYLES)

    @app.route('/api/game/state')
    def get_game_state():
        """Get current game state."""
        return jsonify(serialize_state(game))

    @app.route('/api/game/move', methods=['POST'])
    def play_round():
        """Play a round for the active player."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Request body must be a JSON object', 'state': serialize_state(game)}), 400

        column = data.get('column')

        if column is None:
            return jsonify({'error': 'Column not specified', 'state': serialize_state(game)}), 400
        if isinstance(column, bool) or not isinstance(column, int):
            return jsonify({'error': 'Column must be an integer', 'state': serialize_state(game)}), 400

        result = game.play_round(column)
        debug.debug(f"Web round in column {column}: won={result.won} error={result.error}", "web")

        response = {'round': serialize_round(result), 'state': serialize_state(game)}
        if not result.ok:
            response['error'] = str(result.error)
            return jsonify(response), 400
        return jsonify(response)

    @app.route('/api/game/reset', methods=['POST'])
    def reset_game():
        """Reset the current game."""
        game.reset()
        return jsonify(serialize_state(game))

    return app
