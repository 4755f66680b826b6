"""Survival counters and the bomb check."""

import logging
import random

from ..models import BombResult
from ..player import Player

logger = logging.getLogger(__name__)

THIRD_BOMB_THRESHOLD = 2
"""Survivals after which the next bomb check is always fatal."""

DEATH_ODDS = 3
"""One in this many bomb checks kills the player."""


class SurvivalTracker:
    """Tracks consecutive bomb survivals per player index."""

    def __init__(self, num_players: int, rng: random.Random) -> None:
        self.rng = rng
        self._counters: list[int] = [0] * num_players

    def count(self, index: int) -> int:
        return self._counters[index]

    def set_count(self, index: int, value: int) -> None:
        """Set a counter directly (setup and testing)."""
        if value < 0:
            raise ValueError("Survival counter cannot be negative")
        self._counters[index] = value

    def reset(self, index: int) -> None:
        self._counters[index] = 0

    def bomb_check(self, player: Player) -> BombResult:
        """Run a bomb check against a player and apply the outcome.

        A player who has already survived twice dies without a draw.
        Otherwise one draw decides: death with probability 1/3.
        """
        index = player.index
        third_bomb = self._counters[index] >= THIRD_BOMB_THRESHOLD

        if third_bomb:
            died = True
        else:
            died = self.rng.randrange(DEATH_ODDS) == 0

        if died:
            player.alive = False
            self._counters[index] = 0
        else:
            self._counters[index] += 1

        logger.debug(
            "Bomb check on %s: %s (survivals now %d)",
            player.name,
            "died" if died else "survived",
            self._counters[index],
        )
        return BombResult(
            player_index=index,
            died=died,
            third_bomb=third_bomb,
            survivals=self._counters[index],
        )

    def __len__(self) -> int:
        return len(self._counters)
