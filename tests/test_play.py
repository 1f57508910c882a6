"""Tests for tricks and card legality."""
import pytest

from coinche.deck import Card, Hand, Rank, Suit
from coinche.errors import CardMissing, IncorrectSuit, InvalidPiss, NonRaisedTrump, TurnError
from coinche.play import Trick, can_play, has_higher, highest_trump, is_legal, legal_plays
from coinche.scoring import trump_strength
from coinche.seats import P0, P1, P2, P3

H, S, D, C = Suit.HEART, Suit.SPADE, Suit.DIAMOND, Suit.CLUB


def card(suit, rank) -> Card:
    return Card(suit, rank)


def test_empty_trick():
    trick = Trick(P2)
    assert trick.starting_suit() is None
    assert trick.winner == P2
    assert trick.score(H) == 0
    assert trick.cards_played() == []
    assert not trick.is_complete()


def test_trick_winner_and_completion():
    trick = Trick(P1)
    assert not trick.play_card(P1, card(C, Rank.SEVEN), H)
    assert trick.starting_suit() == C
    assert trick.winner == P1

    assert not trick.play_card(P2, card(C, Rank.QUEEN), H)
    assert trick.winner == P2

    # Off-suit card never takes the trick, even a strong one.
    assert not trick.play_card(P3, card(S, Rank.ACE), H)
    assert trick.winner == P2

    # Fourth card (the seat before the leader) closes the trick.
    assert trick.play_card(P0, card(H, Rank.SEVEN), H)
    assert trick.winner == P0
    assert trick.is_complete()
    assert [p for p, _ in trick.cards_played()] == [P1, P2, P3, P0]
    # 0 + 3 + 11 + 0
    assert trick.score(H) == 14


def test_higher_trump_wins():
    trick = Trick(P0)
    trick.play_card(P0, card(D, Rank.ACE), S)
    trick.play_card(P1, card(S, Rank.ACE), S)
    trick.play_card(P2, card(S, Rank.NINE), S)
    assert trick.winner == P2
    trick.play_card(P3, card(S, Rank.TEN), S)
    assert trick.winner == P2
    # 11 + 11 + 14 + 10
    assert trick.score(S) == 46


def test_trump_order_within_led_trump():
    trick = Trick(P0)
    trick.play_card(P0, card(H, Rank.ACE), H)
    trick.play_card(P1, card(H, Rank.NINE), H)
    trick.play_card(P2, card(H, Rank.JACK), H)
    trick.play_card(P3, card(H, Rank.TEN), H)
    assert trick.winner == P2


def _hands():
    hands = [Hand() for _ in range(4)]
    for r in (Rank.EIGHT, Rank.TEN, Rank.ACE, Rank.NINE):
        hands[0].add(card(H, r))
    for r in (Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.JACK):
        hands[0].add(card(C, r))

    for r in (Rank.QUEEN, Rank.KING, Rank.TEN, Rank.ACE):
        hands[1].add(card(C, r))
    for r in (Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.JACK):
        hands[1].add(card(S, r))

    for r in (Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.JACK):
        hands[2].add(card(D, r))
    for r in (Rank.QUEEN, Rank.KING):
        hands[2].add(card(S, r))
        hands[2].add(card(H, r))

    for r in (Rank.QUEEN, Rank.KING, Rank.TEN, Rank.ACE):
        hands[3].add(card(D, r))
    for r in (Rank.TEN, Rank.ACE):
        hands[3].add(card(S, r))
    for r in (Rank.SEVEN, Rank.JACK):
        hands[3].add(card(H, r))
    return hands


def test_can_play_sequence():
    hands = _hands()
    trick = Trick(P0)

    # The leader may play anything held, but only what is held.
    with pytest.raises(CardMissing):
        can_play(P0, card(D, Rank.ACE), hands[0], trick, H)
    can_play(P0, card(C, Rank.SEVEN), hands[0], trick, H)
    trick.play_card(P0, card(C, Rank.SEVEN), H)

    with pytest.raises(CardMissing):
        can_play(P1, card(H, Rank.SEVEN), hands[1], trick, H)
    with pytest.raises(IncorrectSuit):
        can_play(P1, card(S, Rank.SEVEN), hands[1], trick, H)
    can_play(P1, card(C, Rank.QUEEN), hands[1], trick, H)
    trick.play_card(P1, card(C, Rank.QUEEN), H)

    # No club, opponent winning, holds trumps: must trump.
    with pytest.raises(InvalidPiss):
        can_play(P2, card(D, Rank.SEVEN), hands[2], trick, H)
    can_play(P2, card(H, Rank.QUEEN), hands[2], trick, H)
    trick.play_card(P2, card(H, Rank.QUEEN), H)

    # Trumping over a trump: must go higher when possible.
    with pytest.raises(NonRaisedTrump):
        can_play(P3, card(H, Rank.SEVEN), hands[3], trick, H)
    can_play(P3, card(H, Rank.JACK), hands[3], trick, H)


def test_partner_winning_allows_discard():
    trick = Trick(P0)
    trick.play_card(P0, card(C, Rank.ACE), H)
    trick.play_card(P1, card(C, Rank.SEVEN), H)
    hand = Hand([card(D, Rank.SEVEN), card(H, Rank.JACK)])
    # P2's partner P0 holds the trick with the ace.
    can_play(P2, card(D, Rank.SEVEN), hand, trick, H)
    can_play(P2, card(H, Rank.JACK), hand, trick, H)


def test_no_suit_no_trump_plays_anything():
    trick = Trick(P0)
    trick.play_card(P0, card(C, Rank.ACE), H)
    hand = Hand([card(D, Rank.SEVEN), card(S, Rank.KING), card(D, Rank.ACE)])
    assert legal_plays(P1, hand, trick, H) == hand.list()


def test_must_follow_suit_when_able():
    trick = Trick(P3)
    trick.play_card(P3, card(S, Rank.NINE), D)
    hand = Hand([card(S, Rank.SEVEN), card(D, Rank.JACK), card(H, Rank.ACE)])
    assert legal_plays(P0, hand, trick, D) == [card(S, Rank.SEVEN)]
    assert not is_legal(P0, card(D, Rank.JACK), hand, trick, D)


def test_overtrump_when_trump_is_led():
    trick = Trick(P0)
    trick.play_card(P0, card(H, Rank.NINE), H)

    hand = Hand([card(H, Rank.SEVEN), card(H, Rank.JACK), card(C, Rank.ACE)])
    with pytest.raises(NonRaisedTrump):
        can_play(P1, card(H, Rank.SEVEN), hand, trick, H)
    assert legal_plays(P1, hand, trick, H) == [card(H, Rank.JACK)]

    # Without a higher trump, any trump goes.
    weak = Hand([card(H, Rank.SEVEN), card(H, Rank.ACE), card(C, Rank.ACE)])
    assert legal_plays(P1, weak, trick, H) == [card(H, Rank.SEVEN), card(H, Rank.ACE)]


def test_must_overtrump_even_over_partner():
    trick = Trick(P0)
    trick.play_card(P0, card(H, Rank.KING), H)
    trick.play_card(P1, card(H, Rank.SEVEN), H)
    hand = Hand([card(H, Rank.EIGHT), card(H, Rank.ACE)])
    with pytest.raises(NonRaisedTrump):
        can_play(P2, card(H, Rank.EIGHT), hand, trick, H)


def test_highest_trump_between_leader_and_player():
    trick = Trick(P1)
    trick.play_card(P1, card(C, Rank.ACE), S)
    trick.play_card(P2, card(S, Rank.QUEEN), S)
    trick.play_card(P3, card(S, Rank.NINE), S)
    assert highest_trump(trick, S, P0) == trump_strength(Rank.NINE)
    assert highest_trump(trick, S, P3) == trump_strength(Rank.QUEEN)
    assert highest_trump(trick, S, P2) == -1


def test_has_higher_simple():
    # The ten is always higher than the queen.
    hand = Hand([card(H, Rank.EIGHT), card(S, Rank.TEN)])
    assert has_higher(hand, S, trump_strength(Rank.QUEEN))


def test_has_higher_does_not_mix_suits():
    hand = Hand([card(H, Rank.EIGHT), card(S, Rank.TEN)])
    assert not has_higher(hand, H, trump_strength(Rank.QUEEN))


def test_has_higher_trump_order():
    # In the trump order, the ten is lower than the nine...
    hand = Hand([card(H, Rank.JACK), card(S, Rank.TEN)])
    assert not has_higher(hand, S, trump_strength(Rank.NINE))
    # ...and the jack is higher than the ace.
    hand = Hand([card(H, Rank.EIGHT), card(S, Rank.JACK)])
    assert has_higher(hand, S, trump_strength(Rank.ACE))


def test_has_higher_without_trump():
    hand = Hand([card(H, Rank.JACK), card(D, Rank.JACK), card(S, Rank.JACK)])
    assert not has_higher(hand, C, trump_strength(Rank.SEVEN))


def test_follower_cannot_open_a_trick():
    trick = Trick(P0)
    hand = Hand([card(H, Rank.SEVEN), card(S, Rank.ACE)])
    with pytest.raises(TurnError):
        can_play(P1, card(H, Rank.SEVEN), hand, trick, S)
    assert not is_legal(P1, card(S, Rank.ACE), hand, trick, S)
    assert legal_plays(P1, hand, trick, S) == []
    assert legal_plays(P0, hand, trick, S) == list(hand)


def test_can_play_accepts_int_seats():
    trick = Trick(0)
    trick.play_card(0, card(C, Rank.SEVEN), H)
    hand = Hand([card(C, Rank.ACE), card(H, Rank.SEVEN)])
    with pytest.raises(IncorrectSuit):
        can_play(1, card(H, Rank.SEVEN), hand, trick, H)
    assert legal_plays(1, hand, trick, H) == [card(C, Rank.ACE)]
