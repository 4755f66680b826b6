"""Questioning resolution: reveal, judge, and hand out the bomb."""

import logging
from typing import TYPE_CHECKING

from ..cards import Card, play_is_correct
from ..errors import EngineInvariantError
from ..events import BombOutcome, CardsRevealed, QuestionRaised, QuestionResolved
from ..models import NoPlay, QuestionResult
from ..player import Player

if TYPE_CHECKING:
    from ..game import GameState
    from ..protocols import EventSink

logger = logging.getLogger(__name__)


class QuestionService:
    """Resolves a question raised against a player's most recent play."""

    def __init__(self, sink: "EventSink") -> None:
        self.sink = sink

    def resolve(
        self,
        game: "GameState",
        questioner: Player,
        accused: Player,
        focus: Card,
        forced: bool = False,
    ) -> QuestionResult:
        """Reveal the accused's pending play and apply the consequences.

        If the play was incorrect the accused faces the bomb, otherwise the
        questioner does. Either way the questioner leads the next round.

        Args:
        ----
            game: The game state
            questioner: Player raising the question
            accused: Player whose last play is questioned
            focus: The round's focus card
            forced: Whether the question was forced by the two-player rule

        Returns:
        -------
            QuestionResult describing the reveal and the bomb check

        """
        for player in (questioner, accused):
            if game.index_of(player) is None:
                raise EngineInvariantError(f"{player.name} is not tracked by this game")

        self.sink.emit(QuestionRaised(questioner=questioner.name, accused=accused.name, forced=forced))

        revealed = game.pending.reveal(accused.index)
        self.sink.emit(
            CardsRevealed(
                player=accused.name,
                cards=revealed.cards,
                had_record=not isinstance(revealed, NoPlay),
            )
        )

        correct = play_is_correct(revealed.cards, focus)
        at_risk = questioner if correct else accused
        self.sink.emit(
            QuestionResolved(
                questioner=questioner.name,
                accused=accused.name,
                correct_play=correct,
                at_risk=at_risk.name,
            )
        )
        logger.debug(
            "%s questioned %s: play was %s",
            questioner.name,
            accused.name,
            "correct" if correct else "incorrect",
        )

        bomb = game.survival.bomb_check(at_risk)
        self.sink.emit(
            BombOutcome(
                player=at_risk.name,
                died=bomb.died,
                third_bomb=bomb.third_bomb,
                survivals=bomb.survivals,
            )
        )

        self._hand_lead_to(game, questioner)

        return QuestionResult(
            questioner_index=questioner.index,
            accused_index=accused.index,
            focus=focus,
            revealed=revealed,
            correct_play=correct,
            forced=forced,
            bomb=bomb,
        )

    def _hand_lead_to(self, game: "GameState", questioner: Player) -> None:
        """Point the next round at the questioner, whether or not they survived."""
        game.round_state.active_index = game.index_of(questioner)
