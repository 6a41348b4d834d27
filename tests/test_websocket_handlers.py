"""
Testing the Socket.IO plumbing between the browser board and the game.
"""

import pytest

from wordle_widget.services.word_source import FixedWordSource


@pytest.fixture
def game_id(game_service):
    return game_service.create_new_game()


def events(client, name):
    return [packet['args'][0] for packet in client.get_received() if packet['name'] == name]


def joined(socket_client, game_id):
    socket_client.emit('join_game', {'game_id': game_id})
    return events(socket_client, 'game_state_update')


def test_join_game_sends_state(socket_client, game_id):
    updates = joined(socket_client, game_id)

    assert len(updates) == 1
    assert updates[0]['state']['game_id'] == game_id
    assert updates[0]['state']['status'] == 'active'


def test_missing_or_unknown_game_id(socket_client):
    socket_client.emit('join_game', {})
    assert events(socket_client, 'error') == [{'error': 'Game ID is required'}]

    socket_client.emit('input', {'game_id': 'missing', 'value': 'C'})
    assert events(socket_client, 'error') == [{'error': 'Game not found', 'game_id': 'missing'}]


def test_input_is_pushed_to_room(socket_client, game_id):
    joined(socket_client, game_id)

    socket_client.emit('input', {'game_id': game_id, 'value': 'cra'})
    updates = events(socket_client, 'game_state_update')

    assert updates[-1]['state']['input_buffer'] == 'CRA'


def test_rejected_input_pushes_nothing(socket_client, game_id):
    joined(socket_client, game_id)

    socket_client.emit('input', {'game_id': game_id, 'value': 'c4'})

    assert events(socket_client, 'game_state_update') == []


def test_before_input_rejection(socket_client, game_id, game_service):
    socket_client.emit('before_input', {'game_id': game_id, 'data': '7'})
    assert events(socket_client, 'input_rejected') == [{'game_id': game_id, 'data': '7'}]

    game_service.handle_input(game_id, 'CRANE')
    socket_client.emit('before_input', {'game_id': game_id, 'data': 's'})
    assert len(events(socket_client, 'input_rejected')) == 1


def test_submit_and_failure(socket_client, game_service):
    game_service.word_source = FixedWordSource('CRANE', 1)
    game_id = game_service.create_new_game()
    joined(socket_client, game_id)

    socket_client.emit('submit', {'game_id': game_id, 'value': 'wrong'})
    state = events(socket_client, 'game_state_update')[-1]['state']

    assert state['status'] == 'failure'
    assert state['answer'] == 'CRANE'
    assert state['message'] == 'Better luck next time 😔'


def test_submit_without_value_uses_buffer(socket_client, game_id, game_service):
    joined(socket_client, game_id)
    socket_client.emit('input', {'game_id': game_id, 'value': 'crane'})

    socket_client.emit('submit', {'game_id': game_id})

    assert game_service.get_session(game_id).state.is_success


def test_submit_with_rejected_value_does_not_submit_buffer(socket_client, game_id, game_service):
    joined(socket_client, game_id)
    socket_client.emit('input', {'game_id': game_id, 'value': 'crate'})

    socket_client.emit('submit', {'game_id': game_id, 'value': 'cr4ne'})

    session = game_service.get_session(game_id)
    assert session.state.current_round == 0
    assert session.state.input_buffer == 'CRATE'


def test_repeated_joins_push_each_update_once(app_and_socketio, socket_client, game_id, game_service):
    app, socketio = app_and_socketio
    other_client = socketio.test_client(app)
    joined(socket_client, game_id)
    joined(socket_client, game_id)
    joined(other_client, game_id)

    game_service.handle_input(game_id, 'C')

    assert len(events(socket_client, 'game_state_update')) == 1
    assert len(events(other_client, 'game_state_update')) == 1
    other_client.disconnect()


def test_reset_pushes_fresh_state(socket_client, game_id, game_service):
    joined(socket_client, game_id)
    game_service.handle_input(game_id, 'CRANE')
    game_service.submit_guess(game_id)
    socket_client.get_received()

    socket_client.emit('reset', {'game_id': game_id})
    state = events(socket_client, 'game_state_update')[-1]['state']

    assert state['status'] == 'active'
    assert state['current_round'] == 0


def test_blur_and_touch_refocus(socket_client, game_id):
    socket_client.emit('blur', {'game_id': game_id})
    socket_client.emit('touch', {'game_id': game_id})

    assert events(socket_client, 'focus_input') == [
        {'action': 'focus', 'target': 'input'},
        {'action': 'focus', 'target': 'input'},
    ]


def test_http_transitions_reach_socket_room(socket_client, client, game_id):
    joined(socket_client, game_id)

    client.post(f'/api/game/{game_id}/input', json={'text': 'cr'})

    updates = events(socket_client, 'game_state_update')
    assert updates[-1]['state']['input_buffer'] == 'CR'


def test_leave_game_stops_pushes(socket_client, game_id, game_service):
    joined(socket_client, game_id)
    socket_client.emit('leave_game', {'game_id': game_id})

    game_service.handle_input(game_id, 'C')

    assert events(socket_client, 'game_state_update') == []
