"""
Round Tracker

Holds the letters typed in each round, keyed by 0-based round index.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class RoundGuesses:
    """
    Immutable record of per-round letters.

    Round indices are contiguous from 0. Only the latest round can change;
    once a later round has been recorded, every earlier round is frozen.
    """
    rounds: Tuple[Tuple[str, ...], ...] = ()

    @property
    def latest_round(self) -> int:
        """Index of the newest recorded round, or -1 when nothing is recorded."""
        return len(self.rounds) - 1

    def record_letters(self, round_index: int, letters: Iterable[str]) -> "RoundGuesses":
        """
        Store the whole letter sequence for `round_index`.

        Returns a new tracker. Recording into a frozen round returns self
        unchanged. Skipped rounds in between are recorded as empty.
        """
        if round_index < 0:
            raise ValueError("round_index cannot be negative")
        if self.is_frozen(round_index):
            return self

        letters = tuple(letters)
        rounds = self.rounds[:round_index]
        # Fill any gap so indices stay contiguous
        rounds += ((),) * (round_index - len(rounds))
        return RoundGuesses(rounds=rounds + (letters,))

    def get_letters(self, round_index: int) -> Tuple[str, ...]:
        """Letters recorded for a round, or an empty tuple."""
        if 0 <= round_index < len(self.rounds):
            return self.rounds[round_index]
        return ()

    def is_frozen(self, round_index: int) -> bool:
        return round_index < self.latest_round
