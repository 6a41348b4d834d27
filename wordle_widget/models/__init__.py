"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameConfig,
    GameSnapshot,
    GameState,
    GameStatus,
    GridCell,
    GridColumn,
    GridView,
    LetterStatus,
)

__all__ = [
    'GameConfig', 'GameSnapshot', 'GameState', 'GameStatus',
    'GridCell', 'GridColumn', 'GridView', 'LetterStatus'
]
