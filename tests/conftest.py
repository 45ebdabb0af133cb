from __future__ import annotations

from typing import List, Sequence

import pytest

from whist.cards import Card, Rank, Suit
from whist.game import WhistGame
from whist.rules_schema import TRICKS_PER_DEAL

ORDERED_RANKS = list(Rank)


def cards_of(suit: Suit, *ranks: Rank) -> List[Card]:
    return [Card(suit, rank) for rank in ranks]


def deck_for_hands(hands: Sequence[Sequence[Card]]) -> List[Card]:
    """Arrange a deck so dealing hands seat ``s`` exactly ``hands[s]`` in order."""
    deck: List[Card] = [None] * (4 * TRICKS_PER_DEAL)  # type: ignore[list-item]
    for seat, hand in enumerate(hands):
        assert len(hand) == TRICKS_PER_DEAL
        for round_no, card in enumerate(hand):
            deck[len(deck) - 1 - (round_no * 4 + seat)] = card
    return deck


@pytest.fixture
def trump_cut_hands() -> List[List[Card]]:
    """Seat 0 leads the five of spades, seat 1 and 2 are void in spades."""
    spades_low = [rank for rank in ORDERED_RANKS if rank not in (Rank.FIVE, Rank.ACE)]
    return [
        cards_of(Suit.SPADES, Rank.FIVE, *spades_low) + cards_of(Suit.DIAMONDS, Rank.TWO),
        cards_of(Suit.CLUBS, Rank.KING, *[r for r in ORDERED_RANKS if r is not Rank.KING]),
        cards_of(Suit.HEARTS, *ORDERED_RANKS),
        cards_of(Suit.SPADES, Rank.ACE) + cards_of(Suit.DIAMONDS, *ORDERED_RANKS[1:]),
    ]


@pytest.fixture
def clubs_lead_hands() -> List[List[Card]]:
    """Every seat leads off its hand with a club; seat 3 holds more clubs and the aces."""
    return [
        cards_of(Suit.CLUBS, Rank.FIVE) + cards_of(Suit.SPADES, *ORDERED_RANKS[:-1]),
        cards_of(Suit.CLUBS, Rank.KING) + cards_of(Suit.HEARTS, *ORDERED_RANKS[:-1]),
        cards_of(Suit.CLUBS, Rank.TWO) + cards_of(Suit.DIAMONDS, *ORDERED_RANKS[:-1]),
        cards_of(Suit.CLUBS, Rank.NINE)
        + cards_of(Suit.SPADES, Rank.ACE)
        + cards_of(Suit.HEARTS, Rank.ACE)
        + cards_of(Suit.DIAMONDS, Rank.ACE)
        + cards_of(
            Suit.CLUBS,
            Rank.THREE,
            Rank.FOUR,
            Rank.SIX,
            Rank.SEVEN,
            Rank.EIGHT,
            Rank.TEN,
            Rank.JACK,
            Rank.QUEEN,
            Rank.ACE,
        ),
    ]


@pytest.fixture
def make_game():
    def _make(hands: Sequence[Sequence[Card]], trump: Suit | None = None, **kwargs) -> WhistGame:
        game = WhistGame(deck=deck_for_hands(hands), **kwargs)
        game.start()
        if trump is not None:
            game.set_trump(trump)
        return game

    return _make
