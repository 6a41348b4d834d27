"""
Input Capture

Bridges raw text-entry events from the browser to the game service.
"""

import re
from typing import Dict, Optional
from ..models.game import GameSnapshot

LETTERS_PATTERN = re.compile(r'^[a-zA-Z]*$')

FOCUS_DIRECTIVE = {'action': 'focus', 'target': 'input'}


class InputCapture:
    """
    Input boundary of one game.

    Mirrors what the capture field does in the browser: reject non-letters
    before they land, force uppercase, cap the value at the word length and
    keep the field focused.
    """

    def __init__(self, game_service, game_id: str):
        self.game_service = game_service
        self.game_id = game_id

    @property
    def max_length(self) -> int:
        session = self.game_service.get_session(self.game_id)
        return session.config.word_length if session else 0

    def _buffer(self) -> str:
        session = self.game_service.get_session(self.game_id)
        return session.state.input_buffer if session else ''

    def before_input(self, data: Optional[str]) -> bool:
        """
        Decides whether an insertion may reach the field.

        Returns:
            False for data with non-letter characters or data that would
            overflow the word length, True otherwise
        """
        data = data or ''
        if not LETTERS_PATTERN.fullmatch(data):
            return False
        return len(self._buffer()) + len(data) <= self.max_length

    def on_input(self, value: Optional[str]) -> Optional[GameSnapshot]:
        """Forwards the field's new value, uppercased and truncated to the word length."""
        value = (value or '').upper()[:self.max_length]
        return self.game_service.handle_input(self.game_id, value)

    def on_enter(self, value: Optional[str]) -> Optional[GameSnapshot]:
        """
        Form submission: store the final value, then submit it.

        A value the game rejects is not submitted, so an earlier buffer is
        never sent in its place.
        """
        value = (value or '').upper()[:self.max_length]
        state = self.on_input(value)
        if state is None or state.input_buffer != value:
            return state
        return self.game_service.submit_guess(self.game_id)

    def on_blur(self) -> Dict[str, str]:
        return dict(FOCUS_DIRECTIVE)

    def on_touch(self) -> Dict[str, str]:
        return dict(FOCUS_DIRECTIVE)
