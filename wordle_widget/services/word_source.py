"""
Word Sources

Upstream collaborators that supply a GameConfig whenever a game starts or is
reset.
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional
from ..config.game_settings import MAX_ROUNDS, WORD_LIST, validate_word_list_integrity
from ..models.game import GameConfig


class WordSource(ABC):
    """Supplies the configuration of the next game."""

    @abstractmethod
    def next_config(self) -> GameConfig:
        raise NotImplementedError


class FixedWordSource(WordSource):
    """Always supplies the same word, e.g. a pinned puzzle of the day."""

    def __init__(self, word: str, round_limit: int = MAX_ROUNDS):
        self.config = GameConfig.for_word(word, round_limit)
        self.requests = 0

    def next_config(self) -> GameConfig:
        self.requests += 1
        return self.config


class WordListSource(WordSource):
    """Picks words from a list using its own random generator."""

    def __init__(self, words: Optional[List[str]] = None, round_limit: int = MAX_ROUNDS,
                 seed: Optional[int] = None):
        self.words = [word.upper() for word in (words if words is not None else WORD_LIST)]
        validate_word_list_integrity(self.words)
        self.round_limit = round_limit
        self.rng = random.Random(seed)

    def next_config(self) -> GameConfig:
        return GameConfig.for_word(self.rng.choice(self.words), self.round_limit)
