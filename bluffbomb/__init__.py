"""Bomb Bluff - a turn-based bluffing card game with an escalating bomb."""

from .cards import Card, Deck, play_is_correct
from .game import GameState, create_game
from .rounds import RoundEngine

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Deck",
    "play_is_correct",
    "GameState",
    "create_game",
    "RoundEngine",
]
