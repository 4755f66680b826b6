"""Round management - drives turns, questioning and round transitions.

A game is a sequence of rounds. Each round deals fresh hands, fixes a
focus card and passes turns around the table until someone questions a
play (voluntarily or because the two-player rule forces it) or nobody
is left who can play.
"""

import logging
from typing import TYPE_CHECKING

from .cards import Card
from .errors import EngineInvariantError, InvalidMoveError
from .events import (
    FirstPlayerChosen,
    GameWon,
    HandShown,
    NullSink,
    PlayMade,
    QuestionDeclined,
    RoundEnded,
    RoundStarted,
)
from .game import GameState
from .models import QuestionResult
from .player import Player
from .services import QuestionService
from .types import QuestionMode

if TYPE_CHECKING:
    from .protocols import EventSink, MoveProvider, QuestionDecider

logger = logging.getLogger(__name__)

MAX_PLAY = 3
BOT_QUESTION_PROBABILITY = 0.30


class RoundEngine:
    """Runs rounds until a single player is left holding cards.

    The engine is the only writer of game state. Human seats get their moves
    from ``move_provider`` and their questioning decisions from
    ``question_decider``; bot seats use the built-in random policy.
    """

    def __init__(
        self,
        sink: "EventSink | None" = None,
        move_provider: "MoveProvider | None" = None,
        question_decider: "QuestionDecider | None" = None,
    ) -> None:
        """Initialize the round engine."""
        self.sink = sink if sink is not None else NullSink()
        self.move_provider = move_provider
        self.question_decider = question_decider
        self.question_service = QuestionService(self.sink)
        self.results: list[QuestionResult] = []

    # ------------------------------------------------------------------
    # Game loop
    # ------------------------------------------------------------------

    def play_game(self, game: GameState) -> Player | None:
        """Play rounds until the game ends and return the winner."""
        self.sink.emit(FirstPlayerChosen(player=game.get_player(game.round_state.active_index).name))
        self.start_round(game)
        return self.run_rounds(game)

    def run_rounds(self, game: GameState) -> Player | None:
        """Play the current round and any that follow, then declare the winner."""
        while game.should_continue():
            self.play_round(game)
            self.sink.emit(
                RoundEnded(
                    round_number=game.round_state.round_number,
                    questioned=game.round_state.question_asked,
                )
            )
            if not game.should_continue():
                break
            self.start_round(game)

        winner = game.finish()
        logger.debug("Game over after %d rounds", game.round_state.round_number)
        self.sink.emit(GameWon(winner=winner.name if winner else None))
        return winner

    def start_round(self, game: GameState) -> None:
        """Deal, pick the focus card and show the human their hand."""
        round_state = game.start_round()
        self.sink.emit(RoundStarted(round_number=round_state.round_number, focus=round_state.focus))
        self._show_human_hand(game)

    def play_round(self, game: GameState) -> None:
        """Pass turns until the round ends."""
        round_state = game.round_state

        while True:
            if game.count_alive_with_cards() <= 1:
                return

            current = game.get_player(round_state.active_index)
            if not current.can_play:
                nxt = game.next_alive_with_cards(current.index)
                if nxt is None:
                    return
                logger.debug("Skipping %s", current.name)
                round_state.active_index = nxt
                continue

            self.take_turn(game, current)

            nxt = game.next_alive_with_cards(current.index)
            if nxt is None:
                return
            next_player = game.get_player(nxt)

            if self.question_is_forced(game, current):
                self._question(game, next_player, current, mode="forced")
                return

            if self.wants_to_question(game, next_player, current):
                self._question(game, next_player, current, mode="voluntary")
                return
            self.sink.emit(QuestionDeclined(questioner=next_player.name, accused=current.name))

            round_state.active_index = nxt

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def take_turn(self, game: GameState, player: Player) -> list[Card]:
        """Let the player put down cards and record them face down."""
        if not player.can_play:
            raise EngineInvariantError(f"{player.name} cannot take a turn")

        if player.is_human:
            if self.move_provider is None:
                raise EngineInvariantError(f"No move provider for human player {player.name}")
            self._show_hand(player)
            played = self._human_play(player)
        else:
            played = player.play_from_back(game.rng.randint(1, MAX_PLAY))

        game.pending.record(player.index, played)
        self.sink.emit(PlayMade(player=player.name, count=len(played)))
        return played

    def _human_play(self, player: Player) -> list[Card]:
        hand_size = len(player.hand)
        count = self.move_provider.choose_move_count(hand_size)
        if not 1 <= count <= min(MAX_PLAY, hand_size):
            raise InvalidMoveError(player.name, f"cannot play {count} card(s) from {hand_size}")

        positions = set(self.move_provider.choose_card_positions(hand_size, count))
        if len(positions) != count:
            raise InvalidMoveError(player.name, f"expected {count} distinct positions, got {sorted(positions)}")
        if any(not 0 <= pos < hand_size for pos in positions):
            raise InvalidMoveError(player.name, f"positions {sorted(positions)} out of range")

        return player.play_positions(positions)

    # ------------------------------------------------------------------
    # Questioning
    # ------------------------------------------------------------------

    def question_is_forced(self, game: GameState, previous: Player) -> bool:
        """Two players left and the one who just played has emptied their hand."""
        return (
            not game.round_state.question_asked
            and game.count_alive() == 2
            and not previous.hand
        )

    def wants_to_question(self, game: GameState, questioner: Player, accused: Player) -> bool:
        """Ask the human, or roll for a bot."""
        if questioner.is_human and not accused.is_human:
            if self.question_decider is None:
                raise EngineInvariantError(f"No question decider for human player {questioner.name}")
            return self.question_decider.decide_to_question()
        return game.rng.random() < BOT_QUESTION_PROBABILITY

    def _question(
        self, game: GameState, questioner: Player, accused: Player, mode: QuestionMode
    ) -> QuestionResult:
        logger.debug("%s questions %s (%s)", questioner.name, accused.name, mode)
        game.round_state.question_asked = True
        result = self.question_service.resolve(
            game,
            questioner=questioner,
            accused=accused,
            focus=game.round_state.focus,
            forced=mode == "forced",
        )
        self.results.append(result)
        return result

    # ------------------------------------------------------------------
    # Hidden information
    # ------------------------------------------------------------------

    def _show_human_hand(self, game: GameState) -> None:
        human = game.human
        if human is not None and human.alive:
            self._show_hand(human)

    def _show_hand(self, player: Player) -> None:
        self.sink.emit(HandShown(player=player.name, cards=tuple(player.hand)))
