"""
Game Service

Owns the in-memory game sessions and drives them through the state machine.
"""

import threading
import uuid
from typing import Callable, Dict, List, Optional
from ..models.game import GameSnapshot
from ..utils.game_logger import game_logger
from .game_machine import (
    GameSession, apply_input, apply_submit, reset_session, revealed_answer, start_session
)
from .grid_presenter import banner_message, render_grid
from .word_source import WordSource

Observer = Callable[[GameSnapshot], None]


class GameService:
    """
    Core game service managing game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Requesting a new word from the word source on start and reset
    - Routing input and submissions through the state machine
    - Notifying subscribers after every accepted transition
    """

    def __init__(self, word_source: WordSource):
        self.word_source = word_source
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self._observers: Dict[str, List[Observer]] = {}
        self._lock = threading.RLock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a config from the word source.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = start_session(self.word_source.next_config())
        with self._lock:
            self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the client-facing state of a session (answer hidden until the game is over).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return build_snapshot(game_id, session)

    def handle_input(self, game_id: str, text: str) -> Optional[GameSnapshot]:
        """
        Replaces the typed letters of the current round.

        Invalid text is ignored and the unchanged state is returned.
        """
        return self._transition(game_id, lambda session: apply_input(session, text))

    def submit_guess(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Submits the typed word. Ignored while the word is incomplete.
        """
        return self._transition(game_id, apply_submit)

    def reset_game(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Restarts a game with a fresh config from the word source.
        """
        return self._transition(
            game_id, lambda session: reset_session(self.word_source.next_config())
        )

    def subscribe(self, game_id: str, observer: Observer) -> Optional[Callable[[], None]]:
        """
        Registers a callback receiving a snapshot after every accepted transition.
        Subscribing the same callback twice registers it once.

        Returns:
            A function that removes the subscription, or None if game not found
        """
        with self._lock:
            if game_id not in self.games:
                return None
            observers = self._observers.setdefault(game_id, [])
            if observer not in observers:
                observers.append(observer)

        def unsubscribe():
            with self._lock:
                observers = self._observers.get(game_id, [])
                if observer in observers:
                    observers.remove(observer)

        return unsubscribe

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session and its subscriptions from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            self._observers.pop(game_id, None)
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def _transition(self, game_id: str, step: Callable[[GameSession], GameSession]) -> Optional[GameSnapshot]:
        # Observers run under the lock so snapshots reach them in transition order
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            next_session = step(session)
            snapshot = build_snapshot(game_id, next_session)
            if next_session is session:
                return snapshot

            self.games[game_id] = next_session
            for observer in list(self._observers.get(game_id, [])):
                try:
                    observer(snapshot)
                except Exception as e:
                    game_logger.logger.error(f"Observer failed for game {game_id}: {e}")
            return snapshot


def build_snapshot(game_id: str, session: GameSession) -> GameSnapshot:
    """Renders a session into its client-facing snapshot."""
    state = session.state
    return GameSnapshot(
        game_id=game_id,
        status=state.status.value,
        current_round=state.current_round,
        round_limit=session.config.round_limit,
        word_length=session.config.word_length,
        input_buffer=state.input_buffer,
        is_success=state.is_success,
        is_failure=state.is_failure,
        grid=render_grid(session),
        answer=revealed_answer(session),
        message=banner_message(session),
    )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source)
    return _game_service
