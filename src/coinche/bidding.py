"""
Bidding (enchères) for 4 players.
Targets: 80 < 90 < ... < 160 < Capot. Each bid must raise the last one; a bid
stands once the three other players pass after it. Coinche doubles the current
contract, surcoinche doubles it again and closes the auction.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from .deal import Hands, deal_hands
from .deck import Hand, Suit
from .errors import (
    AuctionClosed,
    AuctionRunning,
    NoContract,
    NonRaisedTarget,
    OverCoinche,
    TurnError,
)
from .game import GameState
from .seats import NUM_PLAYERS, PlayerPos

logger = logging.getLogger(__name__)

MAX_COINCHE_LEVEL = 2


class Target(IntEnum):
    """Contract goals in ascending order. The value is the score on success."""
    CONTRACT_80 = 80
    CONTRACT_90 = 90
    CONTRACT_100 = 100
    CONTRACT_110 = 110
    CONTRACT_120 = 120
    CONTRACT_130 = 130
    CONTRACT_140 = 140
    CONTRACT_150 = 150
    CONTRACT_160 = 160
    CAPOT = 250  # all 8 tricks

    @property
    def score(self) -> int:
        return int(self)

    def victory(self, points: int, capot: bool) -> bool:
        """Whether this target was reached with the given points / capot."""
        if self is Target.CAPOT:
            return capot
        return points >= self.score

    def __str__(self) -> str:
        return "Capot" if self is Target.CAPOT else str(self.value)

    @classmethod
    def from_str(cls, text: str) -> Target:
        for target in cls:
            if str(target) == text:
                return target
        raise ValueError(f"invalid target: {text}")


@dataclass
class Contract:
    """
    Contract taken by a team: trump suit and target, bid by author.

    coinche_level: 0 = not coinched, 1 = coinched, 2 = surcoinched.
    """

    author: PlayerPos
    trump: Suit
    target: Target
    coinche_level: int = 0

    def __str__(self) -> str:
        text = f"{self.target} {self.trump.symbol} by P{int(self.author)}"
        if self.coinche_level == 1:
            text += " (coinched)"
        elif self.coinche_level == 2:
            text += " (surcoinched)"
        return text


class AuctionState(Enum):
    BIDDING = "bidding"  # players are still bidding for the highest contract
    COINCHING = "coinching"  # contract coinched (or Capot bid): only pass/coinche left
    OVER = "over"  # auction is over, the play can begin
    CANCELLED = "cancelled"  # everybody passed, a new deal is needed


class Auction:
    """
    The whole bidding phase of one deal.

    The seat to act is always base.next_n(pass_count), where base is the seat
    after the author of the last contract, or `first` while no contract exists.
    """

    def __init__(
        self,
        first: PlayerPos,
        hands: Hands | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.first = PlayerPos(first)
        self._history: list[Contract] = []
        self.pass_count = 0
        self.state = AuctionState.BIDDING
        if hands is None:
            hands = deal_hands(rng=rng)
        if len(hands) != NUM_PLAYERS:
            raise ValueError(f"Expected {NUM_PLAYERS} hands, got {len(hands)}")
        self._hands: list[Hand] = [h.copy() for h in hands]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def history(self) -> tuple[Contract, ...]:
        """Copies of the contracts offered so far, oldest first."""
        return tuple(replace(c) for c in self._history)

    def current_contract(self) -> Contract | None:
        """Copy of the last offered contract, or None if nobody bid yet."""
        return replace(self._history[-1]) if self._history else None

    def next_player(self) -> PlayerPos:
        """The player expected to act next."""
        contract = self.current_contract()
        base = contract.author.next() if contract is not None else self.first
        return base.next_n(self.pass_count)

    def hands(self) -> list[Hand]:
        return [h.copy() for h in self._hands]

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _check_turn(self, pos: PlayerPos) -> None:
        if pos != self.next_player():
            logger.debug("Rejected out-of-turn action by %s (expected %s)", pos, self.next_player())
            raise TurnError()

    def _check_open(self) -> None:
        if self.state in (AuctionState.OVER, AuctionState.CANCELLED):
            raise AuctionClosed()

    def bid(self, pos: PlayerPos, trump: Suit, target: Target) -> AuctionState:
        """Offer a new, higher contract."""
        self._check_turn(pos)
        if self.state != AuctionState.BIDDING:
            raise AuctionClosed()
        target = Target(target)
        current = self.current_contract()
        if current is not None and target.score <= current.target.score:
            raise NonRaisedTarget()

        contract = Contract(author=PlayerPos(pos), trump=Suit(trump), target=target)
        self._history.append(contract)
        self.pass_count = 0
        # Nothing above Capot: only coinche or pass remain.
        if contract.target is Target.CAPOT:
            self.state = AuctionState.COINCHING
        logger.debug("Bid accepted: %s", contract)
        return self.state

    def pass_turn(self, pos: PlayerPos) -> AuctionState:
        """
        The current player passes.

        Returns CANCELLED once all 4 players passed without any contract, OVER
        once 3 players passed in a row after a contract, else the unchanged state.
        """
        self._check_turn(pos)
        self._check_open()
        self.pass_count += 1

        if self._history:
            # After 3 passes, we are back to the contract author.
            if self.pass_count >= NUM_PLAYERS - 1:
                self._close(AuctionState.OVER)
        elif self.pass_count >= NUM_PLAYERS:
            self._close(AuctionState.CANCELLED)
        return self.state

    def coinche(self, pos: PlayerPos) -> AuctionState:
        """Coinche (or surcoinche) the current contract."""
        self._check_turn(pos)
        if not self._history:
            raise NoContract()
        contract = self._history[-1]
        if contract.coinche_level >= MAX_COINCHE_LEVEL:
            raise OverCoinche()
        self._check_open()

        contract.coinche_level += 1
        logger.debug("Contract coinched by %s: %s", pos, contract)
        if contract.coinche_level == MAX_COINCHE_LEVEL:
            self._close(AuctionState.OVER)
        else:
            self.state = AuctionState.COINCHING
        return self.state

    def _close(self, state: AuctionState) -> None:
        self.state = state
        if state == AuctionState.OVER:
            logger.info("Auction over: %s", self.current_contract())
        else:
            logger.info("Auction cancelled: every player passed")

    def complete(self) -> GameState:
        """
        Turn a finished auction into the card-play phase.

        The first player leads the first trick; the last contract is played.
        """
        if self.state != AuctionState.OVER:
            raise AuctionRunning()
        if not self._history:
            raise NoContract()
        return GameState(self.first, self._hands, replace(self._history[-1]))


__all__ = ["Target", "Contract", "AuctionState", "Auction", "MAX_COINCHE_LEVEL"]
