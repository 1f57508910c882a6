"""
Score calculation: card points and strengths (trump or not), round result
against the contract, and the coinche multiplier.
152 card points per deal, plus 10 for the last trick ("10 de der").
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .deck import Card, Rank, Suit
from .seats import Team

if TYPE_CHECKING:
    from .bidding import Target

LAST_TRICK_BONUS = 10
# Defenders score this flat amount when the contract fails, whatever they took.
DEFEAT_SCORE = 160
# Coinche level -> score multiplier.
COINCHE_MULTIPLIERS = {0: 1, 1: 2, 2: 4}

_USUAL_SCORE = {
    Rank.SEVEN: 0,
    Rank.EIGHT: 0,
    Rank.NINE: 0,
    Rank.JACK: 2,
    Rank.QUEEN: 3,
    Rank.KING: 4,
    Rank.TEN: 10,
    Rank.ACE: 11,
}

# Weakest first.
USUAL_ORDER = (
    Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.JACK,
    Rank.QUEEN, Rank.KING, Rank.TEN, Rank.ACE,
)
TRUMP_ORDER = (
    Rank.SEVEN, Rank.EIGHT, Rank.QUEEN, Rank.KING,
    Rank.TEN, Rank.ACE, Rank.NINE, Rank.JACK,
)

_USUAL_STRENGTH = {r: i for i, r in enumerate(USUAL_ORDER)}
_TRUMP_STRENGTH = {r: i for i, r in enumerate(TRUMP_ORDER)}


def usual_score(rank: Rank) -> int:
    """Points for a rank outside the trump suit."""
    return _USUAL_SCORE[rank]


def trump_score(rank: Rank) -> int:
    """Points for a rank of the trump suit: Jack 20, Nine 14, others as usual."""
    if rank == Rank.JACK:
        return 20
    if rank == Rank.NINE:
        return 14
    return usual_score(rank)


def usual_strength(rank: Rank) -> int:
    return _USUAL_STRENGTH[rank]


def trump_strength(rank: Rank) -> int:
    return _TRUMP_STRENGTH[rank]


def score(card: Card, trump: Suit) -> int:
    """Number of points card is worth with the current trump suit."""
    if card.suit == trump:
        return trump_score(card.rank)
    return usual_score(card.rank)


def strength(card: Card, trump: Suit) -> int:
    """
    Strength of card with the current trump suit.
    Trumps are offset by 8 so any trump beats any non-trump.
    """
    if card.suit == trump:
        return len(USUAL_ORDER) + trump_strength(card.rank)
    return usual_strength(card.rank)


def points_in_cards(cards, trump: Suit) -> int:
    return sum(score(c, trump) for c in cards)


def round_scores(
    target: Target,
    taking_team: Team,
    taking_points: int,
    capot: bool,
) -> tuple[Team, tuple[int, int]]:
    """
    Winning team and per-team score for a finished round.

    Victory: the taking team scores the contract's nominal value, opponents 0.
    Defeat: the defenders score DEFEAT_SCORE, the taking team 0.
    """
    victory = target.victory(taking_points, capot)
    winners = taking_team if victory else taking_team.opponent()
    scores = [0, 0]
    scores[winners] = target.score if victory else DEFEAT_SCORE
    return winners, (scores[0], scores[1])


def apply_coinche(scores: tuple[int, int], coinche_level: int) -> tuple[int, int]:
    """
    Multiply round scores by the coinche level: ×1, ×2 (coinched), ×4 (over-coinched).

    Not applied by the round engine; callers post-process GameResult.scores.
    """
    try:
        mult = COINCHE_MULTIPLIERS[coinche_level]
    except KeyError:
        raise ValueError(f"Invalid coinche level: {coinche_level}") from None
    return (scores[0] * mult, scores[1] * mult)
