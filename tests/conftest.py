"""Pytest configuration and fixtures."""

import random
from collections import Counter

import pytest

from bluffbomb.cards import Card
from bluffbomb.events import EventLog
from bluffbomb.game import create_game
from bluffbomb.models import RoundState
from bluffbomb.rounds import RoundEngine

_Random = random.Random


class ScriptedRandom(random.Random):
    """Random source whose draws can be scripted per method.

    Scripted values are consumed in order. Once a script runs out, draws
    come from a separately seeded generator. ``calls`` counts every draw.
    """

    def __init__(self, randrange=(), randint=(), random=(), choice=(), seed=0):
        super().__init__(seed)
        self._fallback = _Random(seed)
        self.scripts = {
            "randrange": list(randrange),
            "randint": list(randint),
            "random": list(random),
            "choice": list(choice),
        }
        self.calls: Counter = Counter()

    def _next(self, name):
        self.calls[name] += 1
        script = self.scripts[name]
        return script.pop(0) if script else None

    def randrange(self, *args, **kwargs):
        value = self._next("randrange")
        return self._fallback.randrange(*args, **kwargs) if value is None else value

    def randint(self, a, b):
        value = self._next("randint")
        return self._fallback.randint(a, b) if value is None else value

    def random(self):
        value = self._next("random")
        return self._fallback.random() if value is None else value

    def choice(self, seq):
        value = self._next("choice")
        return self._fallback.choice(seq) if value is None else value

    def shuffle(self, x):
        self.calls["shuffle"] += 1
        self._fallback.shuffle(x)

    def unused(self) -> dict:
        """Scripted values that were never drawn."""
        return {name: values for name, values in self.scripts.items() if values}


class ScriptedHuman:
    """Move provider and question decider with canned answers."""

    def __init__(self, counts=(), positions=(), decisions=()):
        self.counts = list(counts)
        self.positions = list(positions)
        self.decisions = list(decisions)
        self.asked_to_question = 0

    def choose_move_count(self, hand_size: int) -> int:
        return self.counts.pop(0)

    def choose_card_positions(self, hand_size: int, count: int) -> set[int]:
        return set(self.positions.pop(0))

    def decide_to_question(self) -> bool:
        self.asked_to_question += 1
        return self.decisions.pop(0)


class RefusingDecider:
    """Decider that fails the test if it is ever consulted."""

    def decide_to_question(self) -> bool:
        raise AssertionError("voluntary question decider should not be consulted")


BOT_TABLE = [
    {"name": "Alice", "is_human": False},
    {"name": "Bob", "is_human": False},
    {"name": "Carol", "is_human": False},
    {"name": "David", "is_human": False},
]


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def event_log():
    return EventLog()


@pytest.fixture
def make_table():
    """Build a game with a fixed first round already in place.

    The first player is index 0 unless ``active`` says otherwise, hands are
    set explicitly, and no deck draws are made.
    """

    def _make(rng=None, hands=None, focus=Card.SUN, active=0, humans=(), dead=()):
        rng = rng or ScriptedRandom()
        configs = [
            {"name": c["name"], "is_human": i in humans} for i, c in enumerate(BOT_TABLE)
        ]
        rng.scripts["randrange"].insert(0, 0)
        game = create_game(configs, rng=rng)
        rng.calls.clear()
        game.round_state = RoundState(focus=focus, active_index=active, round_number=1)
        for i, hand in enumerate(hands or [[] for _ in BOT_TABLE]):
            game.players[i].set_hand(hand)
        for i in dead:
            game.players[i].alive = False
        return game

    return _make


@pytest.fixture
def engine(event_log):
    """Round engine with no human collaborators."""
    return RoundEngine(sink=event_log)
