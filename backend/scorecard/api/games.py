from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user, login_required

games = Blueprint('games', __name__)


def _service():
    return current_app.extensions['game_service']


def _text(body, status=200):
    return current_app.response_class(body, status=status, mimetype='text/plain')


@games.route('', methods=['GET'])
@login_required
def list_games():
    return jsonify(_service().list_games(current_user))


@games.route('/<string:game_id>', methods=['GET'])
@login_required
def get_game(game_id):
    return jsonify(_service().fetch_game(game_id, current_user))


@games.route('', methods=['POST'])
@login_required
def create_game():
    data = request.get_json(silent=True)
    game_id = _service().create_game(current_user, data)
    return _text(game_id, 201)


@games.route('/<string:game_id>', methods=['DELETE'])
@login_required
def delete_game(game_id):
    _service().delete_game(game_id, current_user)
    return '', 204


@games.route('/<string:game_id>/holes/<string:hole_id>', methods=['PATCH'])
@login_required
def update_hole_score(game_id, hole_id):
    data = request.get_json(silent=True) or {}
    scores = data.get('scores') if isinstance(data, dict) else None
    _service().update_hole_score(game_id, hole_id, scores, current_user)
    return _text(f'{game_id} - {hole_id} updated successfully')
