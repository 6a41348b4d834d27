"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game, websocket_game_required
from .helpers import state_payload, error_payload, outcome_event
from .game_logger import game_logger

__all__ = [
    'require_game', 'websocket_game_required',
    'state_payload', 'error_payload', 'outcome_event',
    'game_logger'
]
