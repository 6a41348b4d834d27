"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game constants and the bundled word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, MAX_ROUNDS, SUCCESS_MESSAGE, FAILURE_MESSAGE, START_MESSAGE,
    validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game settings
    'WORD_LIST', 'MAX_ROUNDS', 'SUCCESS_MESSAGE', 'FAILURE_MESSAGE', 'START_MESSAGE',
    'validate_word_list_integrity'
]
