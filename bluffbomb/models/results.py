"""Result models for questioning and bomb checks."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..cards import Card

if TYPE_CHECKING:
    from .pending_play import PendingPlay


@dataclass(frozen=True)
class BombResult:
    """Outcome of one bomb check."""

    player_index: int
    died: bool
    third_bomb: bool
    survivals: int  # counter value after the check


@dataclass(frozen=True)
class QuestionResult:
    """Outcome of a questioning resolution."""

    questioner_index: int
    accused_index: int
    focus: Card
    revealed: "PendingPlay"
    correct_play: bool
    forced: bool
    bomb: BombResult

    @property
    def at_risk_index(self) -> int:
        """Index of the player who faced the bomb."""
        return self.questioner_index if self.correct_play else self.accused_index

    @property
    def questioner_was_right(self) -> bool:
        return not self.correct_play
