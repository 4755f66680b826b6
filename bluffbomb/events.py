"""Structured game events emitted by the engine.

The engine never prints. Everything a table would see or hear is emitted as
one of these events, and the calling layer decides how to render it.
"""

from dataclasses import dataclass
from typing import TypeVar

from .cards import Card


@dataclass(frozen=True)
class GameEvent:
    """Base class for all game events."""


@dataclass(frozen=True)
class RoundStarted(GameEvent):
    round_number: int
    focus: Card


@dataclass(frozen=True)
class FirstPlayerChosen(GameEvent):
    player: str


@dataclass(frozen=True)
class HandShown(GameEvent):
    """A player's own hand, shown only to that player."""

    player: str
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class PlayMade(GameEvent):
    """A player put down cards. Only the count is public."""

    player: str
    count: int


@dataclass(frozen=True)
class QuestionDeclined(GameEvent):
    questioner: str
    accused: str


@dataclass(frozen=True)
class QuestionRaised(GameEvent):
    questioner: str
    accused: str
    forced: bool = False


@dataclass(frozen=True)
class CardsRevealed(GameEvent):
    """The questioned play, or an empty tuple when nothing is on record."""

    player: str
    cards: tuple[Card, ...]
    had_record: bool


@dataclass(frozen=True)
class QuestionResolved(GameEvent):
    questioner: str
    accused: str
    correct_play: bool
    at_risk: str


@dataclass(frozen=True)
class BombOutcome(GameEvent):
    player: str
    died: bool
    third_bomb: bool
    survivals: int


@dataclass(frozen=True)
class RoundEnded(GameEvent):
    round_number: int
    questioned: bool


@dataclass(frozen=True)
class GameWon(GameEvent):
    winner: str | None


E = TypeVar("E", bound=GameEvent)


class EventLog:
    """Event sink that keeps every event in order."""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def emit(self, event: GameEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type[E]) -> list[E]:
        """Get all events of a specific type."""
        return [e for e in self.events if isinstance(e, event_type)]

    def last(self, event_type: type[E]) -> E | None:
        """Get the most recent event of a specific type."""
        matches = self.of_type(event_type)
        return matches[-1] if matches else None

    def clear(self) -> None:
        """Clear all events (for testing)."""
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)


class NullSink:
    """Event sink that discards everything."""

    def emit(self, event: GameEvent) -> None:
        pass
