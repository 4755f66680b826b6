"""Card kinds and the shuffled deck."""

import random
from collections import Counter
from collections.abc import Iterable
from enum import Enum


class Card(str, Enum):
    """The four card kinds in the game."""

    SUN = "Sun"
    STAR = "Star"
    MOON = "Moon"
    MAGIC = "Magic"

    @property
    def is_wildcard(self) -> bool:
        """Magic is accepted against any focus card."""
        return self == Card.MAGIC

    def __str__(self) -> str:
        return self.value


FOCUS_CARDS: tuple[Card, ...] = (Card.SUN, Card.MOON, Card.STAR)
"""Cards a round can focus on (never Magic)."""

DECK_COMPOSITION: dict[Card, int] = {
    Card.SUN: 6,
    Card.STAR: 6,
    Card.MOON: 6,
    Card.MAGIC: 2,
}

DECK_SIZE = sum(DECK_COMPOSITION.values())


def play_is_correct(cards: Iterable[Card], focus: Card) -> bool:
    """Check whether a revealed play matches the focus card.

    An empty play is never correct, so questioning a player with nothing on
    record always goes against them.
    """
    cards = list(cards)
    if not cards:
        return False
    return all(card == focus or card.is_wildcard for card in cards)


class Deck:
    """The fixed 20-card deck. Cards are dealt from the back."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self._cards: list[Card] = []

    def reset(self) -> None:
        """Refill with the fixed composition and shuffle."""
        self._cards.clear()
        for card, count in DECK_COMPOSITION.items():
            self._cards.extend([card] * count)
        self.rng.shuffle(self._cards)

    def deal(self, n: int) -> list[Card]:
        """Remove and return up to n cards. Returns fewer if the deck runs out."""
        hand = []
        while len(hand) < n and self._cards:
            hand.append(self._cards.pop())
        return hand

    def counts(self) -> Counter:
        """Count remaining cards by kind."""
        return Counter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
