"""Per-round state."""

from dataclasses import dataclass

from ..cards import Card


@dataclass
class RoundState:
    """State of the round in progress.

    A fresh RoundState is created at every round start; only the active
    pointer carries over from the previous round.
    """

    focus: Card
    active_index: int
    round_number: int = 1
    question_asked: bool = False

    def __post_init__(self) -> None:
        if self.focus == Card.MAGIC:
            raise ValueError("Magic cannot be the focus card")

    def __repr__(self) -> str:
        asked = ", questioned" if self.question_asked else ""
        return f"RoundState(#{self.round_number}, focus={self.focus.value}, active={self.active_index}{asked})"
