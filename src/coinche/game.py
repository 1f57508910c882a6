"""
Card-play phase of one deal, once the auction is over: 8 tricks, points per
team, and the final score against the contract.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple, Sequence

from .deck import Card, Hand
from .errors import NoLastTrick, PlayError, TurnError
from .play import Trick, can_play, legal_plays
from .scoring import LAST_TRICK_BONUS, round_scores
from .seats import NUM_PLAYERS, PlayerPos, Team

if TYPE_CHECKING:
    from .bidding import Contract

logger = logging.getLogger(__name__)

NUM_TRICKS = 8


class GameResult(NamedTuple):
    """Outcome of a finished deal."""
    points: tuple[int, int]  # card points (with 10 de der) taken by each team
    winners: Team
    scores: tuple[int, int]  # score for this deal, per team


class TrickResult(NamedTuple):
    """
    Result of a single card play.

    winner is None while the trick is still open; game_result is set once the
    8th trick is over.
    """
    winner: PlayerPos | None = None
    game_result: GameResult | None = None

    @property
    def trick_over(self) -> bool:
        return self.winner is not None


class GameState:
    """Mutable state for the card play: hands, current player, tricks, points."""

    def __init__(self, first: PlayerPos, hands: Sequence[Hand], contract: Contract) -> None:
        if len(hands) != NUM_PLAYERS:
            raise ValueError(f"Expected {NUM_PLAYERS} hands, got {len(hands)}")
        self._hands: list[Hand] = [h.copy() for h in hands]
        self.current = PlayerPos(first)
        self.contract = contract
        self._points = [0, 0]
        # Completed tricks plus the one being played; only the last one changes.
        self._tricks: list[Trick] = [Trick(self.current)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def next_player(self) -> PlayerPos:
        """The player expected to play next."""
        return self.current

    def hands(self) -> list[Hand]:
        return [h.copy() for h in self._hands]

    @property
    def points(self) -> tuple[int, int]:
        """Card points taken so far by each team."""
        return (self._points[0], self._points[1])

    @property
    def tricks(self) -> tuple[Trick, ...]:
        return tuple(self._tricks)

    def current_trick(self) -> Trick:
        return self._tricks[-1]

    def last_trick(self) -> Trick:
        """The most recently completed trick."""
        if self.is_over():
            return self._tricks[-1]
        if len(self._tricks) == 1:
            raise NoLastTrick()
        return self._tricks[-2]

    def is_over(self) -> bool:
        return len(self._tricks) == NUM_TRICKS and self._tricks[-1].is_complete()

    def legal_cards(self, pos: PlayerPos) -> list[Card]:
        """Cards pos could legally play into the current trick."""
        return legal_plays(pos, self._hands[pos], self.current_trick(), self.contract.trump)

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def play_card(self, pos: PlayerPos, card: Card) -> TrickResult:
        """
        Play card for pos.

        Raises TurnError, or one of the legality errors from play.can_play;
        in both cases nothing changes.
        """
        pos = PlayerPos(pos)
        if self.is_over() or pos != self.current:
            raise TurnError()

        trump = self.contract.trump
        hand = self._hands[pos]
        try:
            can_play(pos, card, hand, self.current_trick(), trump)
        except PlayError as exc:
            logger.debug("Rejected %s from %s: %s", card, pos, exc)
            raise

        hand.remove(card)
        trick = self.current_trick()
        if not trick.play_card(pos, card, trump):
            self.current = pos.next()
            return TrickResult()

        winner = trick.winner
        self._points[winner.team()] += trick.score(trump)
        logger.debug("Trick %d won by %s: %s", len(self._tricks), winner, trick)
        if len(self._tricks) == NUM_TRICKS:
            # 10 de der
            self._points[winner.team()] += LAST_TRICK_BONUS
        else:
            self._tricks.append(Trick(winner))
        self.current = winner

        result = self.result()
        if result is not None:
            logger.info(
                "Deal over: team %d wins, points %s, scores %s",
                int(result.winners), result.points, result.scores,
            )
        return TrickResult(winner, result)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def is_capot(self, team: Team) -> bool:
        """True if team won every trick played so far."""
        return all(t.winner.team() == team for t in self._tricks)

    def result(self) -> GameResult | None:
        """Final result once the 8th trick is over, else None."""
        if not self.is_over():
            return None

        taking_team = self.contract.author.team()
        taking_points = self._points[taking_team]
        capot = self.is_capot(taking_team)
        winners, scores = round_scores(self.contract.target, taking_team, taking_points, capot)
        return GameResult(points=self.points, winners=winners, scores=scores)
