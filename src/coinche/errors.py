"""
Game-rule violations raised by the auction and the play engine.

All of them are recoverable: the rejected action has no effect on the state,
so the caller can simply ask the same seat again.
"""
from __future__ import annotations


class CoincheError(Exception):
    """Base class for every game-rule violation."""

    message = "invalid action"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class BidError(CoincheError):
    """Invalid action during the auction."""


class PlayError(CoincheError):
    """Invalid action during the card play."""


class TurnError(BidError, PlayError):
    message = "invalid turn order"


class AuctionClosed(BidError):
    message = "auctions are closed"


class NonRaisedTarget(BidError):
    message = "bid must be higher than current contract"


class AuctionRunning(BidError):
    message = "the auction is still running"


class NoContract(BidError):
    message = "no contract was offered"


class OverCoinche(BidError):
    message = "contract is already over-coinched"


class CardMissing(PlayError):
    message = "you can only play cards you have"


class IncorrectSuit(PlayError):
    message = "wrong suit played"


class InvalidPiss(PlayError):
    message = "you must use trumps"


class NonRaisedTrump(PlayError):
    message = "too weak trump played"


class NoLastTrick(PlayError):
    message = "no trick has been played yet"


__all__ = [
    "CoincheError",
    "BidError",
    "PlayError",
    "TurnError",
    "AuctionClosed",
    "NonRaisedTarget",
    "AuctionRunning",
    "NoContract",
    "OverCoinche",
    "CardMissing",
    "IncorrectSuit",
    "InvalidPiss",
    "NonRaisedTrump",
    "NoLastTrick",
]
