"""
Seats around the table. Four fixed positions played in increasing order
(0 -> 1 -> 2 -> 3 -> 0); partners sit opposite, so the team is the seat modulo 2.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Iterator

NUM_PLAYERS = 4


class Team(IntEnum):
    T0 = 0  # seats 0 and 2
    T1 = 1  # seats 1 and 3

    def opponent(self) -> Team:
        return Team(1 - self)


class PlayerPos(IntEnum):
    P0 = 0
    P1 = 1
    P2 = 2
    P3 = 3

    def team(self) -> Team:
        return Team(self % 2)

    def is_partner(self, other: PlayerPos) -> bool:
        """True if both seats play for the same team (a seat is its own partner)."""
        return self.team() == other.team()

    def next(self) -> PlayerPos:
        return PlayerPos((self + 1) % NUM_PLAYERS)

    def prev(self) -> PlayerPos:
        return PlayerPos((self - 1) % NUM_PLAYERS)

    def next_n(self, n: int) -> PlayerPos:
        """The seat n turns further."""
        return PlayerPos((self + n) % NUM_PLAYERS)

    def distance_until(self, other: PlayerPos) -> int:
        """Turns after self needed to reach other: 1..4, a full lap when other is self."""
        return (3 + other - self) % NUM_PLAYERS + 1

    def until_n(self, n: int) -> Iterator[PlayerPos]:
        """Iterate over n seats, starting with this one."""
        pos = self
        for _ in range(n):
            yield pos
            pos = pos.next()

    def until(self, other: PlayerPos) -> Iterator[PlayerPos]:
        """Iterate from self (included) to other (excluded)."""
        return self.until_n(self.distance_until(other))


P0, P1, P2, P3 = PlayerPos
