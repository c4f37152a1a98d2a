from flask import Blueprint, jsonify, request, current_app
from dailyword import socketio
from dailyword.errors import StorageError, ValidationError


puzzle = Blueprint('puzzle', __name__)


def _service():
    return current_app.extensions['game_service']


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _fastest_payload(fastest):
    return {
        'fastestTimeMs': fastest.time_ms if fastest else None,
        'fastestGuesses': fastest.num_guesses if fastest else None,
    }


@puzzle.errorhandler(ValidationError)
def handle_validation_error(exc):
    # Client mistakes, not faults
    current_app.logger.info(f"[rejected] path={request.path} reason={exc.message}")
    return jsonify({'error': exc.message}), 400


@puzzle.errorhandler(StorageError)
def handle_storage_error(exc):
    return jsonify({'error': exc.message}), 503


@puzzle.route('/game', methods=['GET'])
def get_game():
    return jsonify({'gameNumber': _service().current_game()})


@puzzle.route('/guess', methods=['POST'])
def submit_guess():
    data = _json_body()
    outcome = _service().submit_guess(data.get('guess'))
    if outcome.solved:
        current_app.logger.info(f"[guess] game={outcome.game_index} solved=True")
    return jsonify({'result': outcome.result, 'solved': outcome.solved})


@puzzle.route('/solve', methods=['POST'])
def submit_solve():
    data = _json_body()
    game_number = data.get('gameNumber')
    time_ms = data.get('timeMs')
    num_guesses = data.get('numGuesses')

    outcome = _service().submit_solve(game_number, time_ms, num_guesses)
    fastest = outcome.fastest
    current_app.logger.info(
        f"[solve] game={game_number} time_ms={time_ms} guesses={num_guesses} replaced={outcome.replaced} fastest={fastest.time_ms}"
    )

    payload = _fastest_payload(fastest)
    # This submission set the record; tell everyone watching the day
    if outcome.replaced:
        socketio.emit('fastest_update', {'gameNumber': game_number, **payload}, to=f"game:{game_number}", namespace='/ws')
    return jsonify(payload)


@puzzle.route('/fastest/<int(signed=True):game_number>', methods=['GET'])
def get_fastest(game_number):
    return jsonify(_fastest_payload(_service().get_fastest(game_number)))
