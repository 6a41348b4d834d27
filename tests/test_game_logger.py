import json
from types import SimpleNamespace

from wordle_widget.utils.game_logger import GameLogger


def entries(logger):
    lines = logger.log_file.read_text(encoding='utf-8').splitlines()
    return [json.loads(line.split(' | ', 2)[2]) for line in lines if line.strip()]


def test_structured_entries(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path), name=f"wordle_widget_test_{tmp_path.name}")
    request = SimpleNamespace(remote_addr='10.0.0.1', endpoint='game.submit_guess',
                              method='POST', url='http://localhost/api/game/g1/submit')

    logger.log_user_action(request, 'submit_guess', 'g1', guess='CRANE')
    logger.log_game_event('g1', 'game_won', '10.0.0.1', rounds_used=1)

    action, event = entries(logger)
    assert action['event_type'] == 'USER_ACTION'
    assert action['user']['user_ip'] == '10.0.0.1'
    assert action['details']['guess'] == 'CRANE'
    assert event['event_type'] == 'GAME_EVENT'
    assert event['action'] == 'game_won'


def test_response_state_is_summarised(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path), name=f"wordle_widget_test_{tmp_path.name}")
    response = {'success': True, 'state': {
        'status': 'failure', 'current_round': 6, 'round_limit': 6,
        'input_buffer': '', 'answer': 'CRANE', 'grid': {'column_views': []}
    }}

    logger.log_server_response(SimpleNamespace(), 'submit_guess', True, response, 'g1')

    details = entries(logger)[0]['details']
    assert details['response_data']['state'] == {
        'status': 'failure', 'current_round': 6, 'round_limit': 6,
        'input_length': 0, 'answer_revealed': True
    }


def test_log_stats(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path), name=f"wordle_widget_test_{tmp_path.name}")
    request = SimpleNamespace(remote_addr=None)

    logger.log_user_action(request, 'new_game')
    logger.log_error(request, ValueError('boom'), 'new_game')

    stats = logger.get_log_stats()
    assert stats['total_entries'] == 2
    assert stats['user_actions'] == 1
    assert stats['errors'] == 1
