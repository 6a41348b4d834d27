"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict, Optional
from ..models.game import GameSnapshot


def state_payload(snapshot: GameSnapshot) -> Dict[str, Any]:
    """Success payload carrying a JSON-serializable game state."""
    return {
        'success': True,
        'state': asdict(snapshot)
    }


def error_payload(message: str, **extra) -> Dict[str, Any]:
    return {
        'success': False,
        'error': message,
        **extra
    }


def outcome_event(snapshot: Optional[GameSnapshot]) -> Optional[str]:
    """Name of the game event a terminal snapshot represents."""
    if snapshot is None:
        return None
    if snapshot.is_success:
        return 'game_won'
    if snapshot.is_failure:
        return 'game_lost'
    return None
