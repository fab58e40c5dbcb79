"""
Tests for the rendering contract, the Flask browser interface and the
Gymnasium environment.
"""

import json

import numpy as np
import pytest

from connect4.interfaces.gym_env import ConnectFourEnv, CELL_PIXELS
from connect4.interfaces.render import (TOKEN_COLORS, TOKEN_STYLES, serialize_round,
                                        serialize_state)
from connect4.interfaces.web import create_app
from connect4.utils import ROWS, COLS


class TestRenderContract:
    """Test the serializers shared by the interfaces."""

    def test_styles_cover_every_token_value(self):
        assert TOKEN_STYLES == {0: "empty", 1: "player-one", 2: "player-two"}
        assert set(TOKEN_COLORS) == {0, 1, 2}

    def test_serialize_state(self, game):
        game.play_round(3)
        state = serialize_state(game)

        assert state['rows'] == ROWS and state['cols'] == COLS
        assert state['board'][ROWS - 1][3] == 1
        assert state['active_player'] == {'name': 'Player Two', 'token': 2}
        assert state['valid_moves'] == list(range(COLS))
        json.dumps(state)

    def test_serialize_winning_round(self, game):
        for column in [0, 1, 0, 1, 0, 1]:
            game.play_round(column)
        data = serialize_round(game.play_round(0))

        assert data['won'] is True
        assert data['winner'] == {'name': 'Player One', 'token': 1}
        assert data['error'] is None
        assert "Player One wins" in data['message']

    def test_serialize_rejected_round(self, game):
        for _ in range(ROWS):
            game.play_round(2)
        data = serialize_round(game.play_round(2))

        assert data['error'] == "column_full"
        assert data['row'] is None
        assert data['winner'] is None
        assert "Column 2 is full" in data['message']


class TestWebInterface:
    """Test the Flask endpoints."""

    @pytest.fixture
    def client(self, game):
        app = create_app(game)
        app.config['TESTING'] = True
        return app.test_client()

    def test_index_page(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert b'Connect Four' in response.data
        assert b'player-one' in response.data

    def test_initial_state(self, client):
        data = client.get('/api/game/state').get_json()
        assert data['board'] == [[0] * COLS for _ in range(ROWS)]
        assert data['active_player']['token'] == 1

    def test_move_updates_state(self, client, game):
        response = client.post('/api/game/move', json={'column': 4})
        data = response.get_json()

        assert response.status_code == 200
        assert data['round']['row'] == ROWS - 1
        assert data['state']['board'][ROWS - 1][4] == 1
        assert data['state']['active_player']['token'] == 2
        assert game.get_active_player().token == 2

    def test_missing_column(self, client):
        response = client.post('/api/game/move', json={})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Column not specified'

    @pytest.mark.parametrize("body", [[3], 3, "x"])
    def test_non_object_json_body(self, client, game, body):
        response = client.post('/api/game/move', json=body)
        data = response.get_json()

        assert response.status_code == 400
        assert data['error'] == 'Request body must be a JSON object'
        assert data['state']['active_player']['token'] == 1
        assert game.board.is_empty()

    @pytest.mark.parametrize("column", ["3", 1.5, True])
    def test_non_integer_column(self, client, column):
        response = client.post('/api/game/move', json={'column': column})
        assert response.status_code == 400

    def test_out_of_range_column(self, client, game):
        response = client.post('/api/game/move', json={'column': COLS})
        data = response.get_json()

        assert response.status_code == 400
        assert data['round']['error'] == 'invalid_column'
        assert game.board.is_empty()

    def test_full_column(self, client):
        for _ in range(ROWS):
            assert client.post('/api/game/move', json={'column': 0}).status_code == 200
        response = client.post('/api/game/move', json={'column': 0})

        assert response.status_code == 400
        assert response.get_json()['round']['error'] == 'column_full'

    def test_win_clears_board(self, client):
        for column in [0, 1, 0, 1, 0, 1]:
            client.post('/api/game/move', json={'column': column})
        data = client.post('/api/game/move', json={'column': 0}).get_json()

        assert data['round']['won'] is True
        assert data['state']['board'] == [[0] * COLS for _ in range(ROWS)]
        assert data['state']['active_player']['token'] == 1

    def test_reset(self, client):
        client.post('/api/game/move', json={'column': 0})
        data = client.post('/api/game/reset').get_json()

        assert data['active_player']['token'] == 1
        assert not any(any(row) for row in data['board'])


class TestGymEnvironment:
    """Test the Gymnasium wrapper."""

    def test_reset(self):
        env = ConnectFourEnv()
        observation, info = env.reset(seed=0)

        assert observation.shape == (ROWS, COLS)
        assert observation.dtype == np.int8
        assert env.observation_space.contains(observation)
        assert info['valid_moves'] == list(range(COLS))
        assert info['active_player']['token'] == 1

    def test_step_alternates_players(self):
        env = ConnectFourEnv()
        env.reset()
        observation, reward, terminated, truncated, info = env.step(3)

        assert observation[ROWS - 1, 3] == 1
        assert reward == env.reward_step
        assert not terminated and not truncated
        assert info['active_player']['token'] == 2

    def test_win_terminates_with_final_board(self):
        env = ConnectFourEnv()
        env.reset()
        for column in [0, 1, 0, 1, 0, 1]:
            env.step(column)
        observation, reward, terminated, truncated, info = env.step(0)

        assert terminated and not truncated
        assert reward == env.reward_win
        assert not observation.any()
        assert list(info['final_board'][2:, 0]) == [1, 1, 1, 1]
        assert list(info['final_board'][3:, 1]) == [2, 2, 2]

    def test_full_column_truncates(self):
        env = ConnectFourEnv()
        env.reset()
        for _ in range(ROWS):
            env.step(6)
        _, reward, terminated, truncated, info = env.step(6)

        assert truncated and not terminated
        assert reward == env.reward_invalid_move
        assert info['error'] == 'column_full'

    @pytest.mark.parametrize("action", [3.7, "a", None])
    def test_non_integer_action_truncates(self, action):
        env = ConnectFourEnv()
        env.reset()
        observation, reward, terminated, truncated, info = env.step(action)

        assert truncated and not terminated
        assert reward == env.reward_invalid_move
        assert info['error'] == 'invalid_column'
        assert not observation.any()
        assert info['active_player']['token'] == 1

    def test_numpy_integer_action(self):
        env = ConnectFourEnv()
        env.reset()
        observation, _, _, truncated, _ = env.step(np.int64(2))

        assert not truncated
        assert observation[ROWS - 1, 2] == 1

    def test_close_uses_base_env(self):
        env = ConnectFourEnv(render_mode="rgb_array")
        env.reset()
        env.render()
        assert "close" not in vars(ConnectFourEnv)
        env.close()

    def test_ascii_render(self):
        env = ConnectFourEnv(render_mode="ascii")
        env.reset()
        env.step(0)
        assert env.render().splitlines()[ROWS].startswith("|X")

    def test_rgb_render(self):
        env = ConnectFourEnv(render_mode="rgb_array")
        env.reset()
        env.step(0)
        frame = env.render()

        assert frame.shape == (ROWS * CELL_PIXELS, COLS * CELL_PIXELS, 3)
        centre = CELL_PIXELS // 2
        bottom_left = frame[(ROWS - 1) * CELL_PIXELS + centre, centre]
        assert tuple(bottom_left) == TOKEN_COLORS[1]
        assert tuple(frame[centre, centre]) == TOKEN_COLORS[0]

    def test_no_render_mode(self):
        env = ConnectFourEnv()
        env.reset()
        assert env.render() is None
