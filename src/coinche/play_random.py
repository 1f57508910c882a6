"""
Random self-play: every seat picks at random among its legal actions.

Handy to smoke-test the engine end to end and to look at score
distributions over many seeded deals.

Usage:
    summary = simulate_rounds(1000, seed=42)
    summary.scores.mean(axis=0)
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from .bidding import Auction, AuctionState, MAX_COINCHE_LEVEL, Target
from .deck import Suit
from .game import GameState
from .seats import PlayerPos

logger = logging.getLogger(__name__)

# Relative weights of auction actions; passing dominates so auctions end quickly.
PASS_WEIGHT = 8
BID_WEIGHT = 2
COINCHE_WEIGHT = 1


def random_auction(rng: random.Random, first: PlayerPos = PlayerPos.P0) -> Auction:
    """Run an auction with random legal actions until it is over or cancelled."""
    auction = Auction(first, rng=rng)
    while auction.state not in (AuctionState.OVER, AuctionState.CANCELLED):
        pos = auction.next_player()
        contract = auction.current_contract()

        actions = ["pass"] * PASS_WEIGHT
        raises: list[Target] = []
        if auction.state == AuctionState.BIDDING:
            floor = contract.target.score if contract is not None else 0
            raises = [t for t in Target if t.score > floor]
            if raises:
                actions += ["bid"] * BID_WEIGHT
        if contract is not None and contract.coinche_level < MAX_COINCHE_LEVEL:
            actions += ["coinche"] * COINCHE_WEIGHT

        action = rng.choice(actions)
        if action == "bid":
            # Prefer modest raises: pick among the next three targets.
            auction.bid(pos, rng.choice(list(Suit)), rng.choice(raises[:3]))
        elif action == "coinche":
            auction.coinche(pos)
        else:
            auction.pass_turn(pos)
    return auction


def play_random_round(
    rng: random.Random,
    first: PlayerPos = PlayerPos.P0,
) -> tuple[Auction, GameState | None]:
    """
    Deal, bid and play one round at random.

    Returns the finished auction and the finished game, or None for the game
    if everyone passed.
    """
    auction = random_auction(rng, first)
    if auction.state == AuctionState.CANCELLED:
        return auction, None

    game = auction.complete()
    while not game.is_over():
        pos = game.next_player()
        game.play_card(pos, rng.choice(game.legal_cards(pos)))
    return auction, game


@dataclass
class SimulationSummary:
    """Aggregated results of a batch of random rounds."""

    scores: np.ndarray  # shape (played, 2): score per team for each played round
    points: np.ndarray  # shape (played, 2): card points per team
    taker_won: np.ndarray  # shape (played,): True when the contract was made
    cancelled: int

    @property
    def played(self) -> int:
        return int(self.scores.shape[0])

    @property
    def success_rate(self) -> float:
        if self.played == 0:
            return 0.0
        return float(self.taker_won.mean())


def simulate_rounds(num_rounds: int, seed: int) -> SimulationSummary:
    """Play num_rounds seeded random rounds; the first seat rotates each round."""
    rng = random.Random(seed)
    scores: list[tuple[int, int]] = []
    points: list[tuple[int, int]] = []
    taker_won: list[bool] = []
    cancelled = 0

    first = PlayerPos.P0
    for _ in range(num_rounds):
        auction, game = play_random_round(rng, first)
        first = first.next()
        if game is None:
            cancelled += 1
            continue
        result = game.result()
        contract = auction.current_contract()
        scores.append(result.scores)
        points.append(result.points)
        taker_won.append(result.winners == contract.author.team())

    summary = SimulationSummary(
        scores=np.array(scores, dtype=np.int64).reshape(-1, 2),
        points=np.array(points, dtype=np.int64).reshape(-1, 2),
        taker_won=np.array(taker_won, dtype=bool),
        cancelled=cancelled,
    )
    logger.info(
        "Simulated %d rounds (seed=%d): %d played, %d cancelled, success rate %.3f",
        num_rounds, seed, summary.played, summary.cancelled, summary.success_rate,
    )
    return summary


__all__ = ["random_auction", "play_random_round", "SimulationSummary", "simulate_rounds"]
