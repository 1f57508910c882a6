"""
Trick-taking: one trick, legal moves, winner.
Rules: follow suit if you can; otherwise trump unless your partner is
winning; when playing trump, overtrump the best trump so far if you can.
"""
from __future__ import annotations

from .deck import Card, Hand, Rank, Suit
from .errors import CardMissing, IncorrectSuit, InvalidPiss, NonRaisedTrump, PlayError, TurnError
from .scoring import score, strength, trump_strength
from .seats import NUM_PLAYERS, PlayerPos


class Trick:
    """
    Cards of one trick, indexed by seat (None until that seat plays).

    `first` leads; `winner` is the seat currently taking the trick.
    """

    __slots__ = ("cards", "first", "winner")

    def __init__(self, first: PlayerPos) -> None:
        self.cards: list[Card | None] = [None] * NUM_PLAYERS
        self.first = PlayerPos(first)
        self.winner = self.first

    def starting_suit(self) -> Suit | None:
        """Suit of the first card, or None if the trick has not started."""
        card = self.cards[self.first]
        return card.suit if card is not None else None

    def cards_played(self) -> list[tuple[PlayerPos, Card]]:
        """(seat, card) pairs in play order."""
        return [
            (pos, self.cards[pos])
            for pos in self.first.until_n(NUM_PLAYERS)
            if self.cards[pos] is not None
        ]

    def is_complete(self) -> bool:
        return all(c is not None for c in self.cards)

    def score(self, trump: Suit) -> int:
        return sum(score(c, trump) for c in self.cards if c is not None)

    def play_card(self, pos: PlayerPos, card: Card, trump: Suit) -> bool:
        """
        Put card on the table for pos and update the winner.

        Returns True if this was the 4th card of the trick.
        """
        self.cards[pos] = card
        if pos == self.first:
            return False

        best = self.cards[self.winner]
        if _beats(card, best, trump):
            self.winner = PlayerPos(pos)

        return pos == self.first.prev()

    def __str__(self) -> str:
        return " ".join(f"P{int(p)}:{c}" for p, c in self.cards_played())


def _beats(card: Card, best: Card, trump: Suit) -> bool:
    """True if card takes the trick from best. Off-suit non-trumps never win."""
    if card.suit == best.suit:
        return strength(card, trump) > strength(best, trump)
    return card.suit == trump


def has_higher(hand: Hand, trump: Suit, than: int) -> bool:
    """True if hand holds a trump whose trump strength exceeds `than`."""
    return any(
        trump_strength(rank) > than and hand.has(Card(trump, rank))
        for rank in Rank
    )


def highest_trump(trick: Trick, trump: Suit, pos: PlayerPos) -> int:
    """
    Best trump strength played between the trick's first player and pos
    (pos excluded), or -1 if no trump was played yet.
    """
    highest = -1
    for p in trick.first.until(pos):
        card = trick.cards[p]
        if card is not None and card.suit == trump:
            highest = max(highest, trump_strength(card.rank))
    return highest


def can_play(pos: PlayerPos, card: Card, hand: Hand, trick: Trick, trump: Suit) -> None:
    """
    Check that pos may play card from hand into trick.

    Raises CardMissing, IncorrectSuit, InvalidPiss or NonRaisedTrump, and
    TurnError when pos would play into a trick its leader has not opened.
    """
    pos = PlayerPos(pos)
    if not hand.has(card):
        raise CardMissing()

    if pos == trick.first:
        return

    starting_suit = trick.starting_suit()
    if starting_suit is None:
        raise TurnError()
    if card.suit != starting_suit:
        if hand.has_any(starting_suit):
            raise IncorrectSuit()

        if card.suit != trump:
            partner_winning = pos.is_partner(trick.winner)
            if not partner_winning and hand.has_any(trump):
                raise InvalidPiss()

    # One must raise when playing trump.
    if card.suit == trump:
        highest = highest_trump(trick, trump, pos)
        if trump_strength(card.rank) < highest and has_higher(hand, trump, highest):
            raise NonRaisedTrump()


def is_legal(pos: PlayerPos, card: Card, hand: Hand, trick: Trick, trump: Suit) -> bool:
    try:
        can_play(pos, card, hand, trick, trump)
    except PlayError:
        return False
    return True


def legal_plays(pos: PlayerPos, hand: Hand, trick: Trick, trump: Suit) -> list[Card]:
    """Cards of hand that pos may legally play into trick, in id order."""
    return [c for c in hand if is_legal(pos, c, hand, trick, trump)]
