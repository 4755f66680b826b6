"""Console collaborators: keyboard input for the human seat and event rendering."""

import time
from dataclasses import dataclass
from typing import Generic, TypeVar

from rich.console import Console

from .events import (
    BombOutcome,
    CardsRevealed,
    FirstPlayerChosen,
    GameEvent,
    GameWon,
    HandShown,
    PlayMade,
    QuestionDeclined,
    QuestionRaised,
    QuestionResolved,
    RoundEnded,
    RoundStarted,
)
from .formatting import round_header

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing one line of input."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult[T]":
        return cls(error=error)


def _parse_int(text: str) -> ParseResult[int]:
    try:
        return ParseResult.success(int(text.strip()))
    except ValueError:
        return ParseResult.failure("Invalid input! Please enter an integer.")


def parse_move_count(text: str, hand_size: int, max_play: int = 3) -> ParseResult[int]:
    """Parse how many cards to play. Capped by the hand size."""
    parsed = _parse_int(text)
    if not parsed.ok:
        return parsed
    upper = min(max_play, hand_size)
    if not 1 <= parsed.value <= upper:
        return ParseResult.failure(f"Number of cards must be between 1 and {upper}.")
    return parsed


def parse_card_position(text: str, hand_size: int, chosen: set[int]) -> ParseResult[int]:
    """Parse a 1-based card position into a zero-based index."""
    parsed = _parse_int(text)
    if not parsed.ok:
        return parsed
    idx = parsed.value - 1
    if not 0 <= idx < hand_size:
        return ParseResult.failure("Index out of range.")
    if idx in chosen:
        return ParseResult.failure("Index already chosen.")
    return ParseResult.success(idx)


def parse_yes_no(text: str) -> ParseResult[bool]:
    """Parse a y/n answer."""
    answer = text.strip().lower()
    if answer in ("y", "yes"):
        return ParseResult.success(True)
    if answer in ("n", "no"):
        return ParseResult.success(False)
    return ParseResult.failure("Please answer y or n.")


class ConsoleHuman:
    """Move provider and question decider backed by keyboard input."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def _ask(self, prompt: str, parse) -> object:
        while True:
            result = parse(self.console.input(prompt))
            if result.ok:
                return result.value
            self.console.print(f"[red]{result.error}[/red] Try again.")

    def choose_move_count(self, hand_size: int) -> int:
        upper = min(3, hand_size)
        return self._ask(
            f"How many cards do you want to play (1-{upper})? ",
            lambda text: parse_move_count(text, hand_size),
        )

    def choose_card_positions(self, hand_size: int, count: int) -> set[int]:
        chosen: set[int] = set()
        while len(chosen) < count:
            idx = self._ask(
                f"Enter index #{len(chosen) + 1}: ",
                lambda text: parse_card_position(text, hand_size, chosen),
            )
            chosen.add(idx)
        return chosen

    def decide_to_question(self) -> bool:
        return self._ask("Question previous player (y/n)? ", parse_yes_no)


class ConsoleRenderer:
    """Event sink that prints the table's view of the game."""

    def __init__(self, console: Console, delay: float = 0.0) -> None:
        self.console = console
        self.delay = delay

    def emit(self, event: GameEvent) -> None:
        if isinstance(event, RoundStarted):
            self.console.print(round_header(event.round_number, event.focus.value), style="bold cyan")
        elif isinstance(event, FirstPlayerChosen):
            self.console.print(f"First player: [bold]{event.player}[/bold]\n")
        elif isinstance(event, HandShown):
            cards = "  ".join(f"{i}: {card.value}" for i, card in enumerate(event.cards, start=1))
            self.console.print(f"[bold]--- Your Hand ---[/bold]\n{cards}\n")
        elif isinstance(event, PlayMade):
            self.console.print(f"{event.player} played {event.count} card(s) (hidden).")
            self._pause()
        elif isinstance(event, QuestionDeclined):
            self.console.print(f"[dim]{event.questioner} decides NOT to question.[/dim]")
        elif isinstance(event, QuestionRaised):
            verb = "is forced to question" if event.forced else "decides to question"
            self.console.print(f"[yellow]{event.questioner} {verb} {event.accused}![/yellow]")
        elif isinstance(event, CardsRevealed):
            shown = " ".join(c.value for c in event.cards) if event.had_record else "(no record of played cards)"
            self.console.print(f"\nRevealing cards of {event.player}: {shown}")
        elif isinstance(event, QuestionResolved):
            if event.correct_play:
                self.console.print(f"{event.questioner} was wrong to question!")
            else:
                self.console.print(f"{event.accused} played wrongly!")
                self.console.print(f"{event.questioner} was right to question!")
        elif isinstance(event, BombOutcome):
            if event.died:
                extra = " (3rd time bomb)" if event.third_bomb else ""
                self.console.print(f"[bold red]Bomb exploded! {event.player} has died{extra}![/bold red]")
            else:
                self.console.print(
                    f"[green]Bomb did not explode this time! {event.player} has survived "
                    f"({event.survivals}/2).[/green]"
                )
            self._pause()
        elif isinstance(event, RoundEnded):
            self.console.print("\n[italic]ROUND OVER, re-dealing cards.[/italic]\n")
        elif isinstance(event, GameWon):
            if event.winner:
                self.console.print(f"\n[bold green]{event.winner} wins![/bold green]")
            else:
                self.console.print("\n[bold red]Nobody survived.[/bold red]")

    def _pause(self) -> None:
        if self.delay:
            time.sleep(self.delay)
