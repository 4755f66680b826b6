"""Data models for round state, hidden plays and resolution results."""

from .pending_play import NO_PLAY, NoPlay, PendingPlay, PendingPlayStore, Played
from .results import BombResult, QuestionResult
from .round_state import RoundState

__all__ = [
    "NO_PLAY",
    "NoPlay",
    "Played",
    "PendingPlay",
    "PendingPlayStore",
    "RoundState",
    "BombResult",
    "QuestionResult",
]
