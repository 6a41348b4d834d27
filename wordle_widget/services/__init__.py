"""
Services Package

Contains all game logic and service classes.
"""

from .classifier import classify
from .game_machine import GameSession, apply_input, apply_submit, reset_session, start_session
from .game_service import GameService, get_game_service, initialize_game_service
from .grid_presenter import banner_message, render_grid
from .input_capture import InputCapture
from .round_tracker import RoundGuesses
from .word_source import FixedWordSource, WordListSource, WordSource

__all__ = [
    'classify',
    'GameSession', 'apply_input', 'apply_submit', 'reset_session', 'start_session',
    'GameService', 'get_game_service', 'initialize_game_service',
    'banner_message', 'render_grid',
    'InputCapture',
    'RoundGuesses',
    'FixedWordSource', 'WordListSource', 'WordSource'
]
