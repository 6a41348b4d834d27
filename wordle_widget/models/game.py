"""
Game Data Models

Contains all game-related data structures and enums.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

ALPHABET = frozenset(string.ascii_uppercase)


class LetterStatus(Enum):
    """Classification of one guessed letter against the target word."""
    EXACT = "EXACT"
    PARTIAL = "PARTIAL"
    ABSENT = "ABSENT"


class GameStatus(Enum):
    """Lifecycle state of a single game."""
    ACTIVE = "active"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable configuration of one game, supplied by the word source.

    Fields:
        round_limit: Number of guesses allowed (also the number of grid columns)
        grid_dimensions: (rows, columns) where rows is the word length
        target_word: Uppercase answer for this game
    """
    round_limit: int
    grid_dimensions: Tuple[int, int]
    target_word: str

    def __post_init__(self):
        if self.round_limit <= 0:
            raise ValueError("round_limit must be greater than zero")
        if not self.target_word:
            raise ValueError("target_word cannot be empty")
        if not set(self.target_word) <= ALPHABET:
            raise ValueError(f"target_word '{self.target_word}' must contain only uppercase A-Z letters")
        rows, columns = self.grid_dimensions
        if rows != len(self.target_word):
            raise ValueError(f"grid rows ({rows}) must equal the word length ({len(self.target_word)})")
        if columns != self.round_limit:
            raise ValueError(f"grid columns ({columns}) must equal round_limit ({self.round_limit})")

    @classmethod
    def for_word(cls, word: str, round_limit: int) -> "GameConfig":
        """Build a config whose grid is derived from the word and round limit."""
        normalized = word.strip().upper()
        return cls(
            round_limit=round_limit,
            grid_dimensions=(len(normalized), round_limit),
            target_word=normalized,
        )

    @property
    def word_length(self) -> int:
        return len(self.target_word)


@dataclass(frozen=True)
class GameState:
    """Progress of one game: round counter, typed letters and terminal flags."""
    current_round: int = 0
    input_buffer: str = ""
    is_success: bool = False
    is_failure: bool = False

    @property
    def status(self) -> GameStatus:
        if self.is_success:
            return GameStatus.SUCCESS
        if self.is_failure:
            return GameStatus.FAILURE
        return GameStatus.ACTIVE

    @property
    def is_terminal(self) -> bool:
        return self.is_success or self.is_failure


@dataclass
class GridCell:
    """One letter slot; status is a LetterStatus value or None when unclassified."""
    row: int
    letter: Optional[str] = None
    status: Optional[str] = None


@dataclass
class GridColumn:
    """One round's column of the board."""
    column: int
    round_index: int
    active: bool
    cells: List[GridCell] = field(default_factory=list)


@dataclass
class GridView:
    """Rendered board: `columns` round columns of `rows` letter cells each."""
    rows: int
    columns: int
    column_views: List[GridColumn] = field(default_factory=list)


@dataclass
class GameSnapshot:
    """Client-facing game state representation."""
    game_id: str
    status: str
    current_round: int
    round_limit: int
    word_length: int
    input_buffer: str
    is_success: bool
    is_failure: bool
    grid: GridView
    answer: Optional[str] = None  # Only included when game is over
    message: Optional[str] = None
