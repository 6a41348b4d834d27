"""
Page Controller

Serves the browser board as a server-rendered page.
"""

from flask import Blueprint, abort, redirect, render_template, request, url_for
from ..services.game_service import get_game_service
from ..services.input_capture import InputCapture
from ..utils.game_logger import game_logger
from ..utils.helpers import outcome_event

page_bp = Blueprint('page', __name__)


def _service_or_404(game_id=None):
    game_service = get_game_service()
    if not game_service:
        abort(503)
    if game_id is not None and game_service.get_session(game_id) is None:
        abort(404)
    return game_service


@page_bp.route('/', methods=['GET'])
def index():
    """Start a new game and send the browser to its board."""
    game_service = _service_or_404()
    game_id = game_service.create_new_game()
    game_logger.log_user_action(request, 'new_game', game_id, surface='page')
    return redirect(url_for('page.play', game_id=game_id))


@page_bp.route('/play/<game_id>', methods=['GET'])
def play(game_id):
    game_service = _service_or_404(game_id)
    return render_template('game.html', state=game_service.get_game_state(game_id))


@page_bp.route('/play/<game_id>', methods=['POST'])
def submit(game_id):
    """Form submission: the whole word typed into the capture field."""
    game_service = _service_or_404(game_id)
    guess = request.form.get('input', '')
    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, surface='page')

    before_round = game_service.get_session(game_id).state.current_round
    state = InputCapture(game_service, game_id).on_enter(guess)
    event = outcome_event(state)
    if event and state.current_round != before_round:
        game_logger.log_game_event(
            game_id, event, request.remote_addr,
            rounds_used=state.current_round, target_word=state.answer
        )
    return redirect(url_for('page.play', game_id=game_id))


@page_bp.route('/play/<game_id>/reset', methods=['POST'])
def reset(game_id):
    game_service = _service_or_404(game_id)
    game_service.reset_game(game_id)
    game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)
    return redirect(url_for('page.play', game_id=game_id))
