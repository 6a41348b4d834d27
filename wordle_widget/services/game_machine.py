"""
Game State Machine

Pure transition functions for a single game. Each function takes a
GameSession and returns the next one; nothing is mutated in place, so the
machine can be driven without any UI present.
"""

from dataclasses import dataclass, replace
from ..models.game import ALPHABET, GameConfig, GameState
from .round_tracker import RoundGuesses


@dataclass(frozen=True)
class GameSession:
    """Everything one game needs: its config, progress and typed letters."""
    config: GameConfig
    state: GameState
    guesses: RoundGuesses


def start_session(config: GameConfig) -> GameSession:
    """Creates an Active session on round 0 with an empty input buffer."""
    return GameSession(
        config=config,
        state=GameState(),
        guesses=RoundGuesses().record_letters(0, ()),
    )


def reset_session(config: GameConfig) -> GameSession:
    """
    Returns a fresh Active session, whatever state the previous one was in.

    The caller is responsible for obtaining `config` from the word source.
    """
    return start_session(config)


def sanitize_input(text: str, word_length: int):
    """
    Uppercases raw text and checks it against the input rules.

    Returns:
        The uppercased text, or None when it contains a character outside
        A-Z or is longer than the word length.
    """
    if text is None:
        return None
    normalized = text.upper()
    if len(normalized) > word_length:
        return None
    if not set(normalized) <= ALPHABET:
        return None
    return normalized


def apply_input(session: GameSession, text: str) -> GameSession:
    """
    Replaces the input buffer while the game is Active.

    Rejected text leaves the session unchanged. Accepted text is mirrored into
    the round tracker for the current round.
    """
    state = session.state
    if state.is_terminal:
        return session

    normalized = sanitize_input(text, session.config.word_length)
    if normalized is None or normalized == state.input_buffer:
        return session

    return replace(
        session,
        state=replace(state, input_buffer=normalized),
        guesses=session.guesses.record_letters(state.current_round, normalized),
    )


def can_submit(session: GameSession) -> bool:
    """True when the game is Active and a full word has been typed."""
    state = session.state
    return not state.is_terminal and len(state.input_buffer) == session.config.word_length


def apply_submit(session: GameSession) -> GameSession:
    """
    Submits the input buffer as the guess for the current round.

    Ignored unless `can_submit`. A correct guess wins immediately, even on the
    last round; otherwise the round advances and the game fails once the round
    limit is reached.
    """
    if not can_submit(session):
        return session

    config = session.config
    state = session.state
    next_round = state.current_round + 1

    # Opening the next round's entry freezes the one just submitted
    guesses = session.guesses.record_letters(state.current_round, state.input_buffer)
    if next_round < config.round_limit:
        guesses = guesses.record_letters(next_round, ())

    if state.input_buffer == config.target_word.upper():
        next_state = GameState(current_round=next_round, is_success=True)
    else:
        next_state = GameState(
            current_round=next_round,
            is_failure=next_round == config.round_limit,
        )

    return GameSession(config=config, state=next_state, guesses=guesses)


def revealed_answer(session: GameSession):
    """The target word once the game is over, otherwise None."""
    if session.state.is_terminal:
        return session.config.target_word
    return None
