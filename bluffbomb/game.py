"""Game state and the player registry."""

import logging
import random
from dataclasses import dataclass, field

from .cards import FOCUS_CARDS, Card, Deck
from .errors import EngineInvariantError
from .models import PendingPlayStore, RoundState
from .player import Player
from .services.survival_service import SurvivalTracker
from .types import PlayerConfig

logger = logging.getLogger(__name__)

HAND_SIZE = 5


@dataclass
class GameState:
    """Everything that lives for one game session.

    GameState owns the players, their hidden plays and their survival
    counters. There is exactly one Deck and one RoundState at a time.
    """

    players: list[Player]
    rng: random.Random = field(default_factory=random.Random)
    round_state: RoundState | None = None
    game_over: bool = False
    winner: Player | None = None

    deck: Deck = field(init=False)
    pending: PendingPlayStore = field(init=False)
    survival: SurvivalTracker = field(init=False)

    def __post_init__(self) -> None:
        """Wire up the per-session components."""
        for i, player in enumerate(self.players):
            if player.index != i:
                raise EngineInvariantError(
                    f"{player.name} has index {player.index} but sits at position {i}"
                )
        self.deck = Deck(self.rng)
        self.pending = PendingPlayStore(len(self.players))
        self.survival = SurvivalTracker(len(self.players), self.rng)

    # ------------------------------------------------------------------
    # Registry queries
    # ------------------------------------------------------------------

    def get_player(self, index: int) -> Player:
        """Look up a player by stable index."""
        if not 0 <= index < len(self.players):
            raise EngineInvariantError(f"No player is tracked at index {index}")
        return self.players[index]

    def get_player_by_name(self, name: str) -> Player | None:
        """Find a player by name."""
        for player in self.players:
            if player.name.lower() == name.lower():
                return player
        return None

    def index_of(self, player: Player) -> int | None:
        """Registry position of this exact player, or None if not seated."""
        for i, p in enumerate(self.players):
            if p is player:
                return i
        return None

    def get_alive_players(self) -> list[Player]:
        """Get all players who are still alive."""
        return [p for p in self.players if p.alive]

    def count_alive(self) -> int:
        return len(self.get_alive_players())

    def count_alive_with_cards(self) -> int:
        return sum(1 for p in self.players if p.can_play)

    def next_alive_with_cards(self, from_index: int) -> int | None:
        """Scan forward circularly after ``from_index`` for a player who can play.

        Pass -1 to start the scan at index 0. Returns None when every alive
        player is out of cards.
        """
        n = len(self.players)
        for step in range(1, n + 1):
            idx = (from_index + step) % n
            if self.players[idx].can_play:
                return idx
        return None

    @property
    def human(self) -> Player | None:
        """The human-controlled seat, if any."""
        return next((p for p in self.players if p.is_human), None)

    # ------------------------------------------------------------------
    # Round transitions
    # ------------------------------------------------------------------

    def deal_to_alive(self, cards_per_player: int = HAND_SIZE) -> None:
        """Replace every alive player's hand with a fresh deal."""
        for player in self.players:
            if player.alive:
                player.set_hand(self.deck.deal(cards_per_player))

    def start_round(self) -> RoundState:
        """Reshuffle, re-deal and pick a new focus card.

        The active pointer carries over from the previous round.
        """
        if self.round_state is None:
            raise EngineInvariantError("start_round called before the first player was chosen")

        self.deck.reset()
        self.deal_to_alive()
        focus: Card = self.rng.choice(FOCUS_CARDS)
        self.pending.clear()
        self.round_state = RoundState(
            focus=focus,
            active_index=self.round_state.active_index,
            round_number=self.round_state.round_number + 1,
        )
        logger.debug("Round %d starts, focus %s", self.round_state.round_number, focus.value)
        return self.round_state

    def should_continue(self) -> bool:
        """The game goes on while more than one alive player holds cards."""
        return self.count_alive_with_cards() > 1

    def determine_winner(self) -> Player | None:
        """First alive player in registry order."""
        for player in self.players:
            if player.alive:
                return player
        return None

    def finish(self) -> Player | None:
        """Mark the game over and record the winner."""
        self.game_over = True
        self.winner = self.determine_winner()
        return self.winner


def create_game(
    player_configs: list[PlayerConfig],
    seed: int | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """Create a new game with the specified seats.

    Args:
    ----
        player_configs: Seats in registry order, each with 'name' and optional 'is_human'
        seed: Seed for a fresh random source (ignored if rng is given)
        rng: Random source to share across the whole session

    Returns:
    -------
        GameState with the first player chosen and no round started yet

    """
    if len(player_configs) < 2:
        raise ValueError("At least two players are required")

    rng = rng or random.Random(seed)
    players = [
        Player(name=config["name"], index=i, is_human=config.get("is_human", False))
        for i, config in enumerate(player_configs)
    ]
    game = GameState(players=players, rng=rng)

    # Round 0 placeholder so the first real round starts at 1 with this pointer
    first = rng.randrange(len(players))
    game.round_state = RoundState(focus=FOCUS_CARDS[0], active_index=first, round_number=0)
    logger.debug("First player: %s", players[first].name)
    return game


def create_game_from_settings(settings, rng: random.Random | None = None) -> GameState:
    """Create a game from GameSettings."""
    return create_game(settings.player_configs(), seed=settings.seed, rng=rng)
