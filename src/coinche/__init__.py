"""Coinche rules engine: auction and card play for one deal."""

__version__ = "0.1.0"

from .deck import Card, Deck, Hand, Rank, Suit, make_deck_32
from .seats import PlayerPos, Team, P0, P1, P2, P3
from .deal import deal_hands, first_to_bid, next_dealer
from .errors import (
    CoincheError,
    BidError,
    PlayError,
    TurnError,
    AuctionClosed,
    NonRaisedTarget,
    AuctionRunning,
    NoContract,
    OverCoinche,
    CardMissing,
    IncorrectSuit,
    InvalidPiss,
    NonRaisedTrump,
    NoLastTrick,
)
from .scoring import score, strength, apply_coinche
from .play import Trick, can_play, legal_plays
from .game import GameState, GameResult, TrickResult
from .bidding import Auction, AuctionState, Contract, Target
