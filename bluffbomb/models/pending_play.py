"""Concealed record of each player's most recent play."""

from dataclasses import dataclass

from ..cards import Card


@dataclass(frozen=True)
class NoPlay:
    """The player has not played yet this round."""

    @property
    def cards(self) -> tuple[Card, ...]:
        return ()

    def __repr__(self) -> str:
        return "NoPlay()"


@dataclass(frozen=True)
class Played:
    """The exact cards a player put down on their last turn."""

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        if not self.cards:
            raise ValueError("A play must contain at least one card")

    def __len__(self) -> int:
        return len(self.cards)


PendingPlay = NoPlay | Played

NO_PLAY = NoPlay()


class PendingPlayStore:
    """Holds the hidden play of every player, keyed by player index.

    Only the count of a play is public. The cards themselves are read back
    through ``reveal`` when that play is questioned.
    """

    def __init__(self, num_players: int) -> None:
        self._plays: list[PendingPlay] = [NO_PLAY] * num_players

    def record(self, index: int, cards: list[Card]) -> Played:
        """Overwrite the player's pending play."""
        play = Played(tuple(cards))
        self._plays[index] = play
        return play

    def reveal(self, index: int) -> PendingPlay:
        """Return the player's pending play for adjudication."""
        return self._plays[index]

    def played_count(self, index: int) -> int:
        """Public information: how many cards the player put down."""
        return len(self._plays[index].cards)

    def clear(self) -> None:
        """Forget all plays at the start of a round."""
        self._plays = [NO_PLAY] * len(self._plays)

    def __len__(self) -> int:
        return len(self._plays)
