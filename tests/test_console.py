"""Tests for console input parsing and event rendering."""

import io

import pytest
from rich.console import Console

from bluffbomb.cards import Card
from bluffbomb.console import (
    ConsoleHuman,
    ConsoleRenderer,
    parse_card_position,
    parse_move_count,
    parse_yes_no,
)
from bluffbomb.events import (
    BombOutcome,
    CardsRevealed,
    GameWon,
    HandShown,
    PlayMade,
    QuestionRaised,
    QuestionResolved,
    RoundStarted,
)


class FakeConsole:
    """Console stand-in that feeds scripted lines and records output."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.printed: list[str] = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        return self.lines.pop(0)

    def print(self, text="", **kwargs):
        self.printed.append(str(text))


class TestParsers:
    """Test result-returning input parsers."""

    @pytest.mark.parametrize("text,expected", [("1", 1), (" 3 ", 3), ("2", 2)])
    def test_move_count_valid(self, text, expected):
        result = parse_move_count(text, hand_size=5)
        assert result.ok
        assert result.value == expected

    @pytest.mark.parametrize("text", ["0", "4", "-1", "abc", "", "1.5"])
    def test_move_count_invalid(self, text):
        result = parse_move_count(text, hand_size=5)
        assert not result.ok
        assert result.value is None
        assert result.error

    def test_move_count_capped_by_hand(self):
        assert not parse_move_count("3", hand_size=2).ok
        assert parse_move_count("2", hand_size=2).value == 2

    def test_non_numeric_message(self):
        assert parse_move_count("x", hand_size=5).error == "Invalid input! Please enter an integer."

    def test_card_position_is_one_based(self):
        result = parse_card_position("1", hand_size=5, chosen=set())
        assert result.value == 0

    def test_card_position_out_of_range(self):
        assert parse_card_position("6", hand_size=5, chosen=set()).error == "Index out of range."
        assert parse_card_position("0", hand_size=5, chosen=set()).error == "Index out of range."

    def test_card_position_duplicate(self):
        assert parse_card_position("2", hand_size=5, chosen={1}).error == "Index already chosen."

    @pytest.mark.parametrize("text,expected", [("y", True), ("Y", True), ("yes", True), ("n", False), ("No", False)])
    def test_yes_no(self, text, expected):
        assert parse_yes_no(text).value is expected

    def test_yes_no_invalid(self):
        assert not parse_yes_no("maybe").ok


class TestConsoleHuman:
    """Test the keyboard-backed move provider."""

    def test_reprompts_until_valid_count(self):
        console = FakeConsole(["abc", "7", "2"])
        human = ConsoleHuman(console)
        assert human.choose_move_count(hand_size=5) == 2
        assert len(console.prompts) == 3
        assert sum("Try again" in line for line in console.printed) == 2

    def test_positions_skip_duplicates(self):
        console = FakeConsole(["2", "2", "9", "4"])
        human = ConsoleHuman(console)
        assert human.choose_card_positions(hand_size=5, count=2) == {1, 3}
        assert any("Index already chosen." in line for line in console.printed)
        assert any("Index out of range." in line for line in console.printed)

    def test_decide_to_question(self):
        human = ConsoleHuman(FakeConsole(["?", "y"]))
        assert human.decide_to_question() is True


class TestConsoleRenderer:
    """Test event rendering."""

    def _render(self, *events) -> str:
        out = io.StringIO()
        renderer = ConsoleRenderer(Console(file=out, width=120, color_system=None))
        for event in events:
            renderer.emit(event)
        return out.getvalue()

    def test_round_header(self):
        text = self._render(RoundStarted(round_number=3, focus=Card.MOON))
        assert "Round 3" in text
        assert "Focus card: Moon" in text

    def test_play_hides_cards(self):
        text = self._render(PlayMade(player="Bot1", count=2))
        assert "Bot1 played 2 card(s) (hidden)." in text

    def test_hand_is_numbered_from_one(self):
        text = self._render(HandShown(player="Human", cards=(Card.SUN, Card.MAGIC)))
        assert "1: Sun" in text
        assert "2: Magic" in text

    def test_forced_question(self):
        text = self._render(QuestionRaised(questioner="Bot2", accused="Human", forced=True))
        assert "Bot2 is forced to question Human!" in text

    def test_reveal_without_record(self):
        text = self._render(CardsRevealed(player="Bot3", cards=(), had_record=False))
        assert "(no record of played cards)" in text

    def test_resolution_and_bomb(self):
        text = self._render(
            CardsRevealed(player="Bot1", cards=(Card.MOON,), had_record=True),
            QuestionResolved(questioner="Human", accused="Bot1", correct_play=False, at_risk="Bot1"),
            BombOutcome(player="Bot1", died=True, third_bomb=True, survivals=0),
        )
        assert "Revealing cards of Bot1: Moon" in text
        assert "Bot1 played wrongly!" in text
        assert "Human was right to question!" in text
        assert "Bot1 has died (3rd time bomb)!" in text

    def test_survival_shows_count(self):
        text = self._render(BombOutcome(player="Bot2", died=False, third_bomb=False, survivals=2))
        assert "Bot2 has survived (2/2)." in text

    def test_winner(self):
        assert "Bot3 wins!" in self._render(GameWon(winner="Bot3"))
