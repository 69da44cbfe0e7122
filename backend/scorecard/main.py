from flask import Blueprint, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the golf scorecard API!'})


@main.route('/healthz')
def healthz():
    return jsonify({'status': 'ok'})
