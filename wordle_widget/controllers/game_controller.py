"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import error_payload, outcome_event, state_payload

game_bp = Blueprint('game', __name__)


def _log_outcome(game_id, snapshot, guess):
    event = outcome_event(snapshot)
    if event:
        game_logger.log_game_event(
            game_id, event, request.remote_addr,
            rounds_used=snapshot.current_round, target_word=snapshot.answer,
            final_guess=guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify(error_payload('Game service unavailable')), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {'game_id': game_id, **state_payload(state)}

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, round_limit=state.round_limit
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = error_payload(str(e))
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        response_data = state_payload(game_service.get_game_state(game_id))
        game_logger.log_server_response(request, 'get_state', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = error_payload(str(e))
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/input', methods=['POST'])
@require_game
def update_input(game_id, game_service=None):
    """Replace the letters typed for the current round."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('text'), str):
            error_response = error_payload('Text is required')
            game_logger.log_server_response(request, 'input', False, error_response, game_id)
            return jsonify(error_response), 400

        text = data['text']
        game_logger.log_user_action(request, 'input', game_id, text_length=len(text))

        state = game_service.handle_input(game_id, text)
        response_data = state_payload(state)
        # Rejected text is not an error; the unchanged buffer tells the client
        response_data['accepted'] = state.input_buffer == text.upper()

        game_logger.log_server_response(request, 'input', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'input', game_id)
        error_response = error_payload(str(e))
        game_logger.log_server_response(request, 'input', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game
def submit_guess(game_id, game_service=None):
    """Submit the typed word for the current round."""
    try:
        guess = game_service.get_session(game_id).state.input_buffer
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        before_round = game_service.get_session(game_id).state.current_round
        state = game_service.submit_guess(game_id)

        response_data = state_payload(state)
        response_data['accepted'] = state.current_round != before_round

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=state.current_round, status=state.status
        )
        if response_data['accepted']:
            _log_outcome(game_id, state, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = error_payload(str(e))
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game
def reset_game(game_id, game_service=None):
    """Restart a game with a new word."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        response_data = state_payload(state)

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        error_response = error_payload(str(e))
        game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify(error_payload('Game service unavailable')), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {'success': success}

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = error_payload(str(e))
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
