"""
Distribution (deal) for 4 players: 8 cards each, given 3 then 2 then 3 at a time.
No cards are left over; the whole 32-card pack is dealt.
"""
from __future__ import annotations

import random

from .deck import Deck, Hand
from .seats import NUM_PLAYERS, PlayerPos

HAND_SIZE = 8
# Cards given to each seat per pass around the table.
DEAL_BATCHES = (3, 2, 3)

Hands = tuple[Hand, Hand, Hand, Hand]


def deal_hands(rng: random.Random | None = None, seed: int | None = None) -> Hands:
    """
    Shuffle a fresh deck and deal it to 4 players in batches of 3, 2, 3.

    With seed, the result is fully determined by it (for tests and replays).
    Otherwise rng is used if given, else a non-deterministic shuffle.
    """
    deck = Deck()
    if seed is not None:
        deck.shuffle_seeded(seed)
    else:
        deck.shuffle(rng or random.Random())

    hands = [Hand() for _ in range(NUM_PLAYERS)]
    for n in DEAL_BATCHES:
        deck.deal_each(hands, n)

    assert deck.is_empty()
    return (hands[0], hands[1], hands[2], hands[3])


def next_dealer(dealer: PlayerPos) -> PlayerPos:
    """Dealer rotates in play direction (0 -> 1 -> 2 -> 3 -> 0)."""
    return dealer.next()


def first_to_bid(dealer: PlayerPos) -> PlayerPos:
    """The player after the dealer speaks first, and also leads the first trick."""
    return dealer.next()
