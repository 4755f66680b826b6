"""Protocol definitions for the engine's collaborators."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .events import GameEvent


class MoveProvider(Protocol):
    """Source of moves for the human seat.

    Implementations are responsible for validating input and re-prompting;
    the engine only accepts values inside the documented ranges.
    """

    def choose_move_count(self, hand_size: int) -> int:
        """Choose how many cards to play.

        Args:
        ----
            hand_size: Number of cards currently in hand

        Returns:
        -------
            An integer in [1, 3], never more than hand_size

        """
        ...

    def choose_card_positions(self, hand_size: int, count: int) -> set[int]:
        """Choose which cards to play.

        Args:
        ----
            hand_size: Number of cards currently in hand
            count: Number of cards to choose

        Returns:
        -------
            ``count`` distinct zero-based positions in [0, hand_size)

        """
        ...


class QuestionDecider(Protocol):
    """Yes/no source for the human's questioning decision."""

    def decide_to_question(self) -> bool:
        """Return True to question the previous player's play."""
        ...


class EventSink(Protocol):
    """Receiver of structured game events."""

    def emit(self, event: "GameEvent") -> None:
        ...
