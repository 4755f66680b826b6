"""Player class representing a seat at the table."""

from dataclasses import dataclass, field

from .cards import Card


@dataclass
class Player:
    """A player in the game.

    Human and bot players share this representation; ``is_human`` only
    decides where moves and questioning decisions come from.
    """

    name: str
    index: int
    is_human: bool = False
    alive: bool = True
    hand: list[Card] = field(default_factory=list)

    @property
    def can_play(self) -> bool:
        """Alive and holding at least one card."""
        return self.alive and bool(self.hand)

    def set_hand(self, cards: list[Card]) -> None:
        """Replace the hand with a fresh deal."""
        self.hand = list(cards)

    def play_from_back(self, count: int) -> list[Card]:
        """Play up to ``count`` cards from the back of the hand."""
        played = []
        while len(played) < count and self.hand:
            played.append(self.hand.pop())
        return played

    def play_positions(self, positions: set[int]) -> list[Card]:
        """Play the cards at the given positions, keeping hand order."""
        ordered = sorted(positions)
        played = [self.hand[i] for i in ordered]
        for i in reversed(ordered):
            del self.hand[i]
        return played

    def __str__(self) -> str:
        status = "alive" if self.alive else "dead"
        return f"{self.name} ({len(self.hand)} cards, {status})"
