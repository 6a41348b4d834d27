"""
WebSocket Event Handlers

Carries raw keystroke, blur and touch events from the browser into the game,
and pushes a fresh game state to the board after every transition.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.input_capture import InputCapture
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import outcome_event

def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    # One broadcaster serves every game; the service registers it once per game
    def broadcast(snapshot):
        socketio.emit('game_state_update', {
            'success': True,
            'state': asdict(snapshot)
        }, room=game_room(snapshot.game_id))

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game's room and receive its current state."""
        join_room(game_room(game_id))
        game_service.subscribe(game_id, broadcast)

        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('before_input')
    @websocket_game_required
    def handle_before_input(data, game_service=None, game_id=None):
        """Vet an insertion before the capture field applies it."""
        text = data.get('data')
        if not InputCapture(game_service, game_id).before_input(text):
            emit('input_rejected', {'game_id': game_id, 'data': text})

    @socketio.on('input')
    @websocket_game_required
    def handle_input(data, game_service=None, game_id=None):
        """The capture field's value changed; the room receives the new state."""
        InputCapture(game_service, game_id).on_input(data.get('value'))

    @socketio.on('submit')
    @websocket_game_required
    def handle_submit(data, game_service=None, game_id=None):
        capture = InputCapture(game_service, game_id)
        session = game_service.get_session(game_id)
        before_round = session.state.current_round
        guess = data.get('value', session.state.input_buffer)

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, surface='websocket')
        state = capture.on_enter(guess)

        event = outcome_event(state)
        if event and state.current_round != before_round:
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                rounds_used=state.current_round, target_word=state.answer
            )

    @socketio.on('reset')
    @websocket_game_required
    def handle_reset(data, game_service=None, game_id=None):
        game_service.reset_game(game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

    @socketio.on('blur')
    @websocket_game_required
    def handle_blur(data, game_service=None, game_id=None):
        emit('focus_input', InputCapture(game_service, game_id).on_blur())

    @socketio.on('touch')
    @websocket_game_required
    def handle_touch(data, game_service=None, game_id=None):
        emit('focus_input', InputCapture(game_service, game_id).on_touch())
