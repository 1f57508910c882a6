"""
Coinche deck: 32 cards (4 suits × 8 ranks, 7 to Ace).
Cards have a dense id 0..31 (suit-major); a Hand is a 32-bit set of ids.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator


class Suit(IntEnum):
    """Cœur, Pique, Carreau, Trèfle. No ordering between suits."""
    HEART = 0
    SPADE = 1
    DIAMOND = 2
    CLUB = 3

    @property
    def symbol(self) -> str:
        return "♥♠♦♣"[self]


class Rank(IntEnum):
    """Natural (non-trump) order, weakest first. The ten sits between King and Ace."""
    SEVEN = 0
    EIGHT = 1
    NINE = 2
    JACK = 3
    QUEEN = 4
    KING = 5
    TEN = 6
    ACE = 7

    @property
    def symbol(self) -> str:
        return ("7", "8", "9", "J", "Q", "K", "X", "A")[self]


NUM_CARDS = 32
RANKS_PER_SUIT = 8
_SUIT_MASK = (1 << RANKS_PER_SUIT) - 1


@dataclass(frozen=True)
class Card:
    """A single card. Immutable and hashable."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        # Coerce plain ints so Card(0, 7) and Card(Suit.HEART, Rank.ACE) compare equal.
        object.__setattr__(self, "suit", Suit(self.suit))
        object.__setattr__(self, "rank", Rank(self.rank))

    @property
    def id(self) -> int:
        """Stable index 0..31: suit * 8 + rank."""
        return self.suit * RANKS_PER_SUIT + self.rank

    @classmethod
    def from_id(cls, card_id: int) -> Card:
        if not 0 <= card_id < NUM_CARDS:
            raise ValueError(f"Invalid card id: {card_id}")
        return cls(Suit(card_id // RANKS_PER_SUIT), Rank(card_id % RANKS_PER_SUIT))

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return str(self)


def make_deck_32() -> list[Card]:
    """Full sorted deck, in id order."""
    return [Card.from_id(i) for i in range(NUM_CARDS)]


class Hand:
    """
    Unordered set of cards held by one seat.

    Backed by an int bitset (bit i set <=> card with id i held), so membership
    and "any card of this suit" are single mask operations.
    """

    __slots__ = ("_bits",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._bits = 0
        for card in cards:
            self.add(card)

    def add(self, card: Card) -> Hand:
        self._bits |= 1 << card.id
        return self

    def remove(self, card: Card) -> None:
        self._bits &= ~(1 << card.id)

    def clear(self) -> None:
        self._bits = 0

    def has(self, card: Card) -> bool:
        return bool(self._bits & (1 << card.id))

    def has_any(self, suit: Suit) -> bool:
        return bool(self._bits & (_SUIT_MASK << (suit * RANKS_PER_SUIT)))

    def is_empty(self) -> bool:
        return self._bits == 0

    def get_card(self) -> Card | None:
        """Card with the lowest id, or None for an empty hand."""
        if not self._bits:
            return None
        lowest = self._bits & -self._bits
        return Card.from_id(lowest.bit_length() - 1)

    def list(self) -> list[Card]:
        return list(self)

    def copy(self) -> Hand:
        other = Hand()
        other._bits = self._bits
        return other

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and self.has(card)

    def __iter__(self) -> Iterator[Card]:
        bits = self._bits
        while bits:
            lowest = bits & -bits
            yield Card.from_id(lowest.bit_length() - 1)
            bits ^= lowest

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return "[" + "".join(f"{c}," for c in self) + "]"

    def __repr__(self) -> str:
        return f"Hand({str(self)})"


class Deck:
    """Ordered 32-card pack. Cards are drawn from the end."""

    def __init__(self) -> None:
        self.cards: list[Card] = make_deck_32()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle in place. Uses provided RNG if given, else the global one."""
        if rng is None:
            random.shuffle(self.cards)
        else:
            rng.shuffle(self.cards)

    def shuffle_seeded(self, seed: int | str | bytes) -> None:
        """Deterministic shuffle: the same seed always yields the same order."""
        random.Random(seed).shuffle(self.cards)

    def draw(self) -> Card:
        if not self.cards:
            raise IndexError("Deck is empty")
        return self.cards.pop()

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def deal_each(self, hands: Iterable[Hand], n: int) -> None:
        """Give n cards to each hand, hand after hand."""
        hands = list(hands)
        if len(self.cards) < len(hands) * n:
            raise ValueError("Deck has too few cards")
        for hand in hands:
            for _ in range(n):
                hand.add(self.draw())

    def __str__(self) -> str:
        return "[" + "".join(f"{c}," for c in self.cards) + "]"
